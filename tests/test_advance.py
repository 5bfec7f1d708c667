"""
Title: Launch Sequencer Fast-Forward Unit Tests
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-16
Version: 1.1

Purpose:
Verifies the bounded fast-forward command: at most the requested number of
whole-second steps is taken, and the run stops on the first terminating step
without consuming the remaining seconds.

Dependencies:
- Python 3.10+
- pytest
- launch_sequencer.py
"""

import pytest

from flight_states import Ascending, Completed
from launch_configuration import LaunchConfiguration
from launch_sequencer import LaunchSequencer, MissionOutcome
from sims.flight_physics import Telemetry


@pytest.fixture
def ascending() -> LaunchSequencer:
    seq = LaunchSequencer()
    seq.begin_checks()
    return seq


def test_advance_five_seconds(ascending):
    result = ascending.advance(5)

    assert result.accepted is True
    assert len(result.snapshots) == 5
    assert result.outcome is None
    assert ascending.telemetry() == Telemetry(5, 50, 50, 5000)
    assert ascending.state == Ascending(stage=5)


def test_advance_ten_seconds_ends_in_failure_after_exactly_ten_steps(ascending):
    result = ascending.advance(10)

    assert len(result.snapshots) == 10
    assert result.snapshots[-1] == Telemetry(10, 0, 100, 10000)
    assert result.outcome is MissionOutcome.FUEL_EXHAUSTED
    assert ascending.state == Completed()


def test_advance_stops_early_and_drops_remaining_seconds(ascending):
    result = ascending.advance(25)

    assert len(result.snapshots) == 10
    assert ascending.telemetry().elapsed_seconds == 10
    assert ascending.is_complete is True


def test_advances_accumulate_stage(ascending):
    ascending.advance(3)
    ascending.advance(4)

    assert ascending.state == Ascending(stage=7)
    assert ascending.telemetry() == Telemetry(7, 30, 70, 7000)


def test_advance_then_launch_finishes_remaining_ascent(ascending):
    ascending.advance(4)
    result = ascending.launch()

    assert len(result.snapshots) == 6
    assert result.snapshots[0].elapsed_seconds == 5
    assert result.outcome is MissionOutcome.FUEL_EXHAUSTED


def test_advance_reports_orbit_success_with_fuel_remaining():
    seq = LaunchSequencer(config=LaunchConfiguration(name="LEO-LITE", orbit_altitude_km=30))
    seq.begin_checks()

    result = seq.advance(8)

    assert len(result.snapshots) == 3
    assert result.outcome is MissionOutcome.ORBIT_ACHIEVED
    assert seq.telemetry().fuel_percent == 70


@pytest.mark.parametrize("n", range(1, 12))
def test_advance_never_exceeds_requested_seconds(n):
    seq = LaunchSequencer()
    seq.begin_checks()

    result = seq.advance(n)

    assert len(result.snapshots) == min(n, 10)
    assert 0 <= seq.telemetry().fuel_percent <= 100


@pytest.mark.parametrize("bad", [0, -3, 2.5, "5", True, None])
def test_advance_rejects_non_positive_or_non_integer_counts(ascending, bad):
    with pytest.raises(ValueError):
        ascending.advance(bad)

    assert ascending.state == Ascending(stage=0)
    assert ascending.telemetry() == Telemetry(0, 100, 0, 0)
