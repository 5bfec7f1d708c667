"""
Title: Launch Sequencer Flight State Definitions
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-16
Version: 1.1

Purpose:
Defines the closed set of flight states used by the launch sequencer state
machine. Each state is an immutable value; transitions replace the current
value rather than mutating it. Only the ASCENDING state carries data (the
number of physics steps taken since ascent began).

Scope and Limitations:
- Exactly three states are modelled: PreLaunch, Ascending and Completed.
- Completed is terminal; there is no path back to PreLaunch.
- No hierarchy or substates are modelled.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)
"""

from dataclasses import dataclass
from enum import Enum, auto


class FlightPhase(Enum):
    PRE_LAUNCH = auto()
    ASCENDING = auto()
    COMPLETED = auto()


@dataclass(frozen=True)
class PreLaunch:
    pass


@dataclass(frozen=True)
class Ascending:
    # Physics steps taken since checks completed.
    stage: int = 0

    def next_stage(self) -> "Ascending":
        return Ascending(stage=self.stage + 1)


@dataclass(frozen=True)
class Completed:
    pass


FlightState = PreLaunch | Ascending | Completed


def phase_of(state: FlightState) -> FlightPhase:
    match state:
        case PreLaunch():
            return FlightPhase.PRE_LAUNCH
        case Ascending():
            return FlightPhase.ASCENDING
        case Completed():
            return FlightPhase.COMPLETED
        case _:
            raise TypeError(f"Unknown flight state: {state!r}")
