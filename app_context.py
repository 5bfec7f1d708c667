"""
Title: Application Context Container for the Launch Sequencer CLI
Author: Alex Cooke
Date Created: 2026-01-15
Last Modified: 2026-01-15
Version: 1.0

Purpose:
Aggregates the launch sequencer, its configuration, the optional command
transcript and the state annunciator into a single explicit container so the
command loop can be wired and tested without module-level globals.

Scope and Limitations:
- Acts purely as a dependency container; contains no flight logic.
- One context holds one mission. Flying again means building a new context.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- typing (standard library)
- launch_configuration.py
- launch_sequencer.py
- command_recorder.py
"""

from dataclasses import dataclass
from typing import Callable

from command_recorder import CommandRecorder
from launch_configuration import LaunchConfiguration
from launch_sequencer import LaunchSequencer


@dataclass
class AppContext:
    sequencer: LaunchSequencer
    config: LaunchConfiguration
    annunciator: Callable[[LaunchSequencer], None]
    recorder: CommandRecorder | None = None

    def record(self, command: str, action: str, accepted: bool) -> None:
        if self.recorder is None:
            return
        self.recorder.record(command=command, action=action, accepted=accepted)
