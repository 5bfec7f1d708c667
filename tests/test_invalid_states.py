"""
Title: Launch Sequencer Command Rejection Unit Tests
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-15
Version: 1.0

Purpose:
Verifies that commands issued in a state where they are not legal are
rejected without any change to the rocket, and that the Completed state is
terminal for every command.

Dependencies:
- Python 3.10+
- pytest
- launch_sequencer.py
"""

import pytest

from flight_states import Completed, PreLaunch
from launch_sequencer import LaunchSequencer


@pytest.fixture
def completed() -> LaunchSequencer:
    seq = LaunchSequencer()
    seq.begin_checks()
    seq.launch()
    assert seq.state == Completed()
    return seq


COMMANDS = {
    "begin_checks": lambda s: s.begin_checks(),
    "launch": lambda s: s.launch(),
    "advance": lambda s: s.advance(3),
}


@pytest.mark.parametrize(
    "command, message",
    [
        ("begin_checks", "Mission is already completed."),
        ("launch", "Mission already completed."),
        ("advance", "Mission already completed."),
    ],
)
def test_completed_rejects_every_command(completed, command, message):
    before = completed.rocket
    outcome = completed.outcome

    result = COMMANDS[command](completed)

    assert result.accepted is False
    assert result.message == message
    assert result.snapshots == ()
    assert result.outcome is None
    assert completed.rocket == before
    assert completed.outcome is outcome


def test_completed_state_is_stable_under_command_spam(completed):
    before = completed.rocket

    for _ in range(5):
        for run in COMMANDS.values():
            assert run(completed).accepted is False

    assert completed.rocket == before


@pytest.mark.parametrize(
    "command, message",
    [
        ("launch", "You must start the pre-launch checks first."),
        ("advance", "Cannot fast forward during pre-launch checks."),
    ],
)
def test_prelaunch_rejects_flight_commands(command, message):
    seq = LaunchSequencer()
    before = seq.rocket

    result = COMMANDS[command](seq)

    assert result.accepted is False
    assert result.message == message
    assert result.snapshots == ()
    assert seq.state == PreLaunch()
    assert seq.rocket == before


def test_unknown_state_value_raises_type_error():
    seq = LaunchSequencer()
    seq._rocket.state = "LAUNCHING"

    with pytest.raises(TypeError):
        seq.launch()
