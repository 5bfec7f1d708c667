"""
Title: Launch Ascent Physics Step Model
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-15
Version: 1.1

Purpose:
Provides the single whole-second physics step used by the launch sequencer
for both run-to-completion launches and bounded fast-forwards. The step is a
pure function: it takes the current telemetry snapshot and the vehicle
configuration and returns the next snapshot together with a termination
verdict. No state is held and no output is produced.

Scope and Limitations:
- Fixed per-second deltas only; not based on any aerodynamic model.
- Fuel is floored at 0 percent.
- Fuel exhaustion is evaluated before the orbit threshold, so a step that
  does both is a failure.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- enum (standard library)
- launch_configuration.py
"""

from dataclasses import dataclass, replace
from enum import Enum, auto

from launch_configuration import LaunchConfiguration


@dataclass(frozen=True)
class Telemetry:
    elapsed_seconds: int
    fuel_percent: int
    altitude_km: int
    speed_kph: int


class StepVerdict(Enum):
    CONTINUE = auto()
    FUEL_EXHAUSTED = auto()
    ORBIT_ACHIEVED = auto()

    @property
    def terminates(self) -> bool:
        return self is not StepVerdict.CONTINUE


@dataclass(frozen=True)
class StepResult:
    telemetry: Telemetry
    verdict: StepVerdict


def initial_telemetry(config: LaunchConfiguration) -> Telemetry:
    return Telemetry(
        elapsed_seconds=0,
        fuel_percent=config.initial_fuel_percent,
        altitude_km=0,
        speed_kph=0,
    )


def apply_physics_step(telemetry: Telemetry, config: LaunchConfiguration) -> StepResult:
    # Advance the ascent by one second and classify the result.
    nxt = replace(
        telemetry,
        elapsed_seconds=telemetry.elapsed_seconds + 1,
        fuel_percent=max(0, telemetry.fuel_percent - config.fuel_burn_percent_per_s),
        altitude_km=telemetry.altitude_km + config.climb_km_per_s,
        speed_kph=telemetry.speed_kph + config.acceleration_kph_per_s,
    )

    if nxt.fuel_percent <= 0:
        return StepResult(nxt, StepVerdict.FUEL_EXHAUSTED)
    if nxt.altitude_km >= config.orbit_altitude_km:
        return StepResult(nxt, StepVerdict.ORBIT_ACHIEVED)
    return StepResult(nxt, StepVerdict.CONTINUE)
