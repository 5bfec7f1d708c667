"""
Title: Launch Sequencer State Machine (Flight Simulation Engine)
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-16
Version: 1.2

Purpose:
Implements the launch sequencer: a deterministic state machine that owns a
single simulated rocket and drives it through pre-launch checks, ascent and
mission completion. Operator commands (begin checks, launch, fast-forward)
are only legal in certain flight states; illegal commands are rejected
without touching the rocket. During ascent every simulated second is applied
through the shared physics step, and the mission ends on the first step that
either exhausts the fuel (failure) or reaches the orbit altitude (success).

Behaviour Summary:
- PreLaunch: checks move the rocket to Ascending(stage=0); launch and
  fast-forward are rejected.
- Ascending: launch runs the ascent to completion; fast-forward runs at most
  the requested number of seconds and stops early on termination; repeated
  checks are ignored.
- Completed: every command is rejected. A new sequencer is needed to fly again.

Scope and Limitations:
- Single-threaded and synchronous. launch() and advance() block until their
  step sequence has finished.
- The sequencer performs no console output. Each command returns a
  CommandResult holding the message, the telemetry for every step taken and
  the mission outcome; presentation is left to the caller.
- Fuel exhaustion takes precedence over reaching orbit within the same step.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)
- logging (standard library)
- flight_states.py
- launch_configuration.py
- sims/flight_physics.py
"""

# Change Log:
#
# 1.2 (2026-01-16)
#   - launch() and advance() now share apply_physics_step(); the previous
#     copies of the step had different loop exits.
#   - Fuel exhaustion is checked before the orbit threshold.
#
# 1.1 (2026-01-15)
#   - Commands return CommandResult instead of printing.
#
# 1.0 (2026-01-14)
#   - Initial PreLaunch / Ascending / Completed state machine.

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from flight_states import Ascending, Completed, FlightPhase, FlightState, PreLaunch, phase_of
from launch_configuration import DEFAULT_LAUNCH_CONFIGURATION, LaunchConfiguration
from sims.flight_physics import StepVerdict, Telemetry, apply_physics_step, initial_telemetry

logger = logging.getLogger(__name__)


class MissionOutcome(Enum):
    FUEL_EXHAUSTED = "Mission Failed due to insufficient fuel."
    ORBIT_ACHIEVED = "Orbit achieved! Mission Successful."

    @property
    def message(self) -> str:
        return self.value

    @property
    def successful(self) -> bool:
        return self is MissionOutcome.ORBIT_ACHIEVED


@dataclass(frozen=True)
class CommandResult:
    accepted: bool
    message: str
    snapshots: tuple[Telemetry, ...] = ()
    outcome: MissionOutcome | None = None


@dataclass
class Rocket:
    # Flight simulation record, owned by exactly one LaunchSequencer.
    fuel_percent: int
    altitude_km: int = 0
    speed_kph: int = 0
    elapsed_seconds: int = 0
    state: FlightState = field(default_factory=PreLaunch)

    @classmethod
    def from_configuration(cls, config: LaunchConfiguration) -> "Rocket":
        start = initial_telemetry(config)
        rocket = cls(fuel_percent=start.fuel_percent)
        rocket.apply(start)
        return rocket

    def telemetry(self) -> Telemetry:
        return Telemetry(
            elapsed_seconds=self.elapsed_seconds,
            fuel_percent=self.fuel_percent,
            altitude_km=self.altitude_km,
            speed_kph=self.speed_kph,
        )

    def apply(self, telemetry: Telemetry) -> None:
        self.elapsed_seconds = telemetry.elapsed_seconds
        self.fuel_percent = telemetry.fuel_percent
        self.altitude_km = telemetry.altitude_km
        self.speed_kph = telemetry.speed_kph


def _state_after_step(state: Ascending, verdict: StepVerdict) -> FlightState:
    match verdict:
        case StepVerdict.CONTINUE:
            return state.next_stage()
        case StepVerdict.FUEL_EXHAUSTED | StepVerdict.ORBIT_ACHIEVED:
            return Completed()
        case _:
            raise TypeError(f"Unknown step verdict: {verdict!r}")


_OUTCOME_BY_VERDICT = {
    StepVerdict.FUEL_EXHAUSTED: MissionOutcome.FUEL_EXHAUSTED,
    StepVerdict.ORBIT_ACHIEVED: MissionOutcome.ORBIT_ACHIEVED,
}


class LaunchSequencer:
    def __init__(self, config: LaunchConfiguration = DEFAULT_LAUNCH_CONFIGURATION):
        self._config = config
        self._rocket = Rocket.from_configuration(config)
        self._outcome: MissionOutcome | None = None

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def config(self) -> LaunchConfiguration:
        return self._config

    @property
    def rocket(self) -> Rocket:
        # Copy, so callers cannot mutate the owned record.
        return replace(self._rocket)

    @property
    def state(self) -> FlightState:
        return self._rocket.state

    @property
    def phase(self) -> FlightPhase:
        return phase_of(self._rocket.state)

    @property
    def outcome(self) -> MissionOutcome | None:
        return self._outcome

    @property
    def is_complete(self) -> bool:
        return isinstance(self._rocket.state, Completed)

    def telemetry(self) -> Telemetry:
        return self._rocket.telemetry()

    def _enter_state(self, new_state: FlightState) -> None:
        old_phase = phase_of(self._rocket.state)
        self._rocket.state = new_state
        new_phase = phase_of(new_state)
        if new_phase != old_phase:
            logger.info("Flight state: %s -> %s", old_phase.name, new_phase.name)

    def _reject(self, command: str, message: str) -> CommandResult:
        logger.info("%s rejected: state=%s", command, self.phase.name)
        return CommandResult(accepted=False, message=message)

    # -------------------------
    # Commands
    # -------------------------

    def begin_checks(self) -> CommandResult:
        match self._rocket.state:
            case PreLaunch():
                self._enter_state(Ascending(stage=0))
                return CommandResult(accepted=True, message="All systems are 'Go' for launch.")
            case Ascending():
                return self._reject("Checks", "Pre-launch checks already completed.")
            case Completed():
                return self._reject("Checks", "Mission is already completed.")
            case other:
                raise TypeError(f"Unknown flight state: {other!r}")

    def launch(self) -> CommandResult:
        # Runs the ascent until the mission ends; not bounded by the caller.
        match self._rocket.state:
            case PreLaunch():
                return self._reject("Launch", "You must start the pre-launch checks first.")
            case Ascending():
                snapshots, outcome = self._run_steps(limit=None)
                return CommandResult(True, "Launching...", snapshots, outcome)
            case Completed():
                return self._reject("Launch", "Mission already completed.")
            case other:
                raise TypeError(f"Unknown flight state: {other!r}")

    def advance(self, seconds: int) -> CommandResult:
        if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds <= 0:
            raise ValueError(f"seconds must be a positive integer, got {seconds!r}")

        match self._rocket.state:
            case PreLaunch():
                return self._reject("Fast forward", "Cannot fast forward during pre-launch checks.")
            case Ascending():
                snapshots, outcome = self._run_steps(limit=seconds)
                return CommandResult(True, f"Fast forwarding {seconds} s...", snapshots, outcome)
            case Completed():
                return self._reject("Fast forward", "Mission already completed.")
            case other:
                raise TypeError(f"Unknown flight state: {other!r}")

    # -------------------------
    # Ascent loop
    # -------------------------

    def _run_steps(self, limit: int | None) -> tuple[tuple[Telemetry, ...], MissionOutcome | None]:
        snapshots: list[Telemetry] = []

        while limit is None or len(snapshots) < limit:
            state = self._rocket.state
            if not isinstance(state, Ascending):
                break

            result = apply_physics_step(self._rocket.telemetry(), self._config)
            self._rocket.apply(result.telemetry)
            snapshots.append(result.telemetry)
            logger.debug("Step: %s", result.telemetry)

            self._enter_state(_state_after_step(state, result.verdict))

            if result.verdict.terminates:
                self._outcome = _OUTCOME_BY_VERDICT[result.verdict]
                logger.info(
                    "Mission ended at t=%ds: %s",
                    result.telemetry.elapsed_seconds,
                    self._outcome.name,
                )
                return tuple(snapshots), self._outcome

        return tuple(snapshots), None
