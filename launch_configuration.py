"""
Title: Launch Vehicle Configuration Model (LaunchConfiguration)
Author: Alex Cooke
Date Created: 2026-01-14
Last Modified: 2026-01-14
Version: 1.0

Purpose:
Defines an immutable data model holding the per-second rates and thresholds
used by the launch sequencer physics step. The configuration also derives
the burnout and orbit times so a vehicle can be checked for whether it is
able to reach orbit at all before it is flown.

Scope and Limitations:
- Rates are constant whole-number deltas applied once per simulated second.
- No drag, gravity losses or staging are modelled.
- Configuration values are static and immutable once instantiated.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- math (standard library)
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchConfiguration:
    # Immutable launch vehicle configuration.
    name: str
    initial_fuel_percent: int = 100
    fuel_burn_percent_per_s: int = 10
    climb_km_per_s: int = 10
    acceleration_kph_per_s: int = 1000
    orbit_altitude_km: int = 100

    def __post_init__(self) -> None:
        if not 0 < self.initial_fuel_percent <= 100:
            raise ValueError(
                f"initial_fuel_percent={self.initial_fuel_percent} (must be in 1..100)"
            )
        for field_name in (
            "fuel_burn_percent_per_s",
            "climb_km_per_s",
            "acceleration_kph_per_s",
            "orbit_altitude_km",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name}={value} (must be > 0)")

    def compute_burnout_time_s(self) -> int:
        # Seconds of ascent until the fuel reaches 0.
        return math.ceil(self.initial_fuel_percent / self.fuel_burn_percent_per_s)

    def compute_orbit_time_s(self) -> int:
        # Seconds of ascent until the orbit altitude is reached.
        return math.ceil(self.orbit_altitude_km / self.climb_km_per_s)

    def reaches_orbit_before_burnout(self) -> bool:
        # A tie counts as burnout: fuel exhaustion is checked first.
        return self.compute_orbit_time_s() < self.compute_burnout_time_s()


DEFAULT_LAUNCH_CONFIGURATION = LaunchConfiguration(name="LV-1")
