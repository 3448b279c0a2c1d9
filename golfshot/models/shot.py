"""
Data models for shot input and trajectory output in golfshot.

ShotParameters: Launch conditions supplied by the caller.
WeatherConditions: Ambient air used to derive sea-level air density.
TrajectoryPoint: One sample of the flight path (or the final resting point).
ShotSummary: Headline numbers read off the final point.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from golfshot.models.ball import BallType
from golfshot.utils.constants import (
    CELSIUS_TO_KELVIN,
    DRY_AIR_GAS_CONSTANT,
    HPA_TO_PA,
    WATER_VAPOR_GAS_CONSTANT,
)


class Side(str, Enum):
    """Which side of the target line an angle points to."""
    RIGHT = "right"
    LEFT = "left"

    @property
    def sign(self) -> float:
        return 1.0 if self is Side.RIGHT else -1.0


# camelCase keys used by form/JSON payloads → dataclass field names
_FIELD_ALIASES = {
    "ballSpeed": "ball_speed",
    "launchAngle": "launch_angle",
    "launchDirection": "launch_direction",
    "launchDirectionSide": "launch_direction_side",
    "spinAxis": "spin_axis",
    "spinDirection": "spin_direction",
    "ballType": "ball_type",
}

_WEATHER_ALIASES = {
    "airPressure": "air_pressure",
}


def weather_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Weather payload with camelCase keys renamed to field names."""
    return {_WEATHER_ALIASES.get(key, key): value for key, value in data.items()}


@dataclass(frozen=True)
class ShotParameters:
    """Launch conditions for one simulated shot.

    Attributes:
        ball_speed: Ball speed off the face (mph), (0, 200].
        launch_angle: Vertical launch angle (degrees), [0, 90].
        launch_direction: Horizontal launch angle magnitude (degrees), [-90, 90].
        launch_direction_side: Side the launch direction points to.
        spin: Spin rate (RPM), [0, 10000]. Required for RPT balls only.
        spin_axis: Spin axis tilt magnitude (degrees), [-90, 90].
            Required for RPT balls only.
        spin_direction: Side the spin axis tilts to.
        ball_type: Ball category; only "RPT Ball" reacts to spin.
    """
    ball_speed: float
    launch_angle: float
    launch_direction: float = 0.0
    launch_direction_side: Side | str = Side.RIGHT
    spin: Optional[float] = None
    spin_axis: Optional[float] = None
    spin_direction: Side | str = Side.RIGHT
    ball_type: BallType | str = BallType.RPT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShotParameters":
        """Build parameters from a payload using camelCase or snake_case keys.

        Missing optional fields fall back to the dataclass defaults; a
        missing ball speed or launch angle raises TypeError.
        """
        kwargs = {_FIELD_ALIASES.get(key, key): value for key, value in data.items()}
        return cls(**kwargs)

    @property
    def signed_launch_direction(self) -> float:
        """Launch direction in degrees, positive = right."""
        return self.launch_direction * Side(self.launch_direction_side).sign

    @property
    def signed_spin_axis(self) -> float:
        """Spin axis tilt in degrees, positive = right. 0 when absent."""
        if self.spin_axis is None:
            return 0.0
        return self.spin_axis * Side(self.spin_direction).sign


@dataclass(frozen=True)
class WeatherConditions:
    """Ambient conditions at the range.

    Attributes:
        temperature: Air temperature (°C).
        air_pressure: Station pressure (hPa).
        humidity: Relative humidity (%).
    """
    temperature: float = 15.0
    air_pressure: float = 1013.25
    humidity: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WeatherConditions":
        """Build conditions from a payload using camelCase or snake_case keys.

        Missing fields fall back to standard air; unknown keys raise TypeError.
        """
        return cls(**weather_fields(data))

    def air_density(self) -> float:
        """Moist-air density (kg/m³) from temperature, pressure and humidity."""
        temperature_k = self.temperature + CELSIUS_TO_KELVIN
        pressure_pa = self.air_pressure * HPA_TO_PA
        # Magnus formula for saturation vapour pressure (Pa)
        saturation_pa = 610.94 * math.exp(
            17.625 * self.temperature / (self.temperature + 243.04)
        )
        vapor_pa = saturation_pa * self.humidity / 100.0
        dry_pa = pressure_pa - vapor_pa
        return (dry_pa / (DRY_AIR_GAS_CONSTANT * temperature_k)
                + vapor_pa / (WATER_VAPOR_GAS_CONSTANT * temperature_k))


@dataclass(frozen=True)
class TrajectoryPoint:
    """One point of a simulated trajectory, in SI units.

    Coordinate system (meters):
        x = downrange (carry axis)
        y = height above ground
        z = lateral (positive = right of target)

    Attributes:
        time: Seconds since launch.
        x, y, z: Position.
        velocity: Speed magnitude (m/s).
        spin: Input spin rate echoed back (RPM, 0 when absent).
        altitude: Highest y reached so far.
        distance: Horizontal distance from the origin.
        total: Same as distance; post-roll on the final point.
        carry: Downrange distance; contact x on the final point.
        side: Lateral offset; contact z on the final point.
        drag: Drag force magnitude (N) at this sample.
        lift: Lift force magnitude (N) at this sample.
        launch_angle: Input launch angle (degrees).
        launch_direction: Signed launch direction (degrees, positive = right).
        spin_axis: Signed spin axis (degrees, positive = right).
        ball_speed: Input ball speed (mph).
    """
    time: float
    x: float
    y: float
    z: float
    velocity: float
    spin: float
    altitude: float
    distance: float
    total: float
    carry: float
    side: float
    drag: float
    lift: float
    launch_angle: float
    launch_direction: float
    spin_axis: float
    ball_speed: float


@dataclass(frozen=True)
class ShotSummary:
    """Headline results of a shot (meters, seconds, m/s).

    Attributes:
        carry: Downrange distance at first ground contact.
        total: Distance from the origin to the resting position.
        apex: Maximum height of the flight.
        side: Lateral offset at first ground contact.
        flight_time: Seconds from launch to ground contact.
        landing_speed: Speed at ground contact.
    """
    carry: float
    total: float
    apex: float
    side: float
    flight_time: float
    landing_speed: float
