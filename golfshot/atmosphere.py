"""
Air density models for golfshot.

air_density_at: exponential scale-height falloff with a linear taper to zero
in the upper atmosphere. Only used when PhysicsConfig.altitude_density is on.

Weather-based sea-level density lives on WeatherConditions.air_density.
"""

import math

from golfshot.utils.constants import (
    AIR_DENSITY,
    SCALE_HEIGHT,
    TAPER_END_ALTITUDE,
    TAPER_START_ALTITUDE,
)


def air_density_at(altitude: float, sea_level_density: float = AIR_DENSITY) -> float:
    """Air density (kg/m³) at a height above the launch point (m).

    Heights at or below zero return the sea-level density.
    """
    if altitude <= 0:
        return sea_level_density
    if altitude >= TAPER_END_ALTITUDE:
        return 0.0

    density = sea_level_density * math.exp(-altitude / SCALE_HEIGHT)
    if altitude > TAPER_START_ALTITUDE:
        density *= (TAPER_END_ALTITUDE - altitude) / (TAPER_END_ALTITUDE - TAPER_START_ALTITUDE)
    return density
