"""
Input range checks for golfshot.

Callers run these before handing parameters to the engine; the engine
itself does not re-validate. Both functions return False instead of
raising for missing, malformed or out-of-range values.
"""

import logging
import math
from numbers import Real
from typing import Any, Mapping

from golfshot.models.ball import BallType
from golfshot.models.shot import ShotParameters, Side, WeatherConditions, weather_fields
from golfshot.utils.constants import (
    MAX_BALL_SPEED_MPH,
    MAX_LAUNCH_ANGLE_DEG,
    MAX_LAUNCH_DIRECTION_DEG,
    MAX_SPIN_AXIS_DEG,
    MAX_SPIN_RPM,
    WEATHER_LIMITS,
)

logger = logging.getLogger(__name__)


def _is_member(enum_cls, value: Any) -> bool:
    try:
        enum_cls(value)
    except (ValueError, TypeError):
        return False
    return True


def _in_range(value: Any, low: float, high: float) -> bool:
    """True for a finite real number within [low, high]."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and low <= value <= high


def _coerce(params: ShotParameters | Mapping[str, Any]) -> ShotParameters | None:
    if isinstance(params, ShotParameters):
        return params
    try:
        return ShotParameters.from_dict(params)
    except (TypeError, AttributeError) as e:
        logger.debug(f"Rejected shot parameters: {e}")
        return None


def validate_shot_parameters(params: ShotParameters | Mapping[str, Any]) -> bool:
    """Check shot parameters against the engine's input domain.

    Ball speed must be in (0, 200] mph, launch angle in [0, 90]°, launch
    direction in [-90, 90]° with a right/left side. Spin (0–10000 rpm),
    spin axis ([-90, 90]°) and spin direction are required only for RPT
    balls and ignored otherwise.

    Args:
        params: ShotParameters, or a mapping with camelCase or snake_case keys.

    Returns:
        True if the parameters may be passed to calculate_trajectory.
    """
    shot = _coerce(params)
    if shot is None:
        return False

    if not _is_member(BallType, shot.ball_type):
        return False

    base_valid = (
        _in_range(shot.ball_speed, 0.0, MAX_BALL_SPEED_MPH)
        and shot.ball_speed > 0
        and _in_range(shot.launch_angle, 0.0, MAX_LAUNCH_ANGLE_DEG)
        and _in_range(shot.launch_direction, -MAX_LAUNCH_DIRECTION_DEG, MAX_LAUNCH_DIRECTION_DEG)
        and _is_member(Side, shot.launch_direction_side)
    )
    if not base_valid:
        return False

    if BallType(shot.ball_type).spin_responsive:
        return (
            _in_range(shot.spin, 0.0, MAX_SPIN_RPM)
            and _in_range(shot.spin_axis, -MAX_SPIN_AXIS_DEG, MAX_SPIN_AXIS_DEG)
            and _is_member(Side, shot.spin_direction)
        )

    return True


def validate_weather_conditions(weather: WeatherConditions | Mapping[str, Any]) -> bool:
    """Check temperature (°C), pressure (hPa) and humidity (%) limits.

    Mappings may use camelCase (airPressure) or snake_case keys, and must
    supply all three values.
    """
    if not isinstance(weather, WeatherConditions):
        try:
            fields = weather_fields(weather)
            if any(name not in fields for name in WEATHER_LIMITS):
                return False
            weather = WeatherConditions.from_dict(fields)
        except (TypeError, AttributeError) as e:
            logger.debug(f"Rejected weather conditions: {e}")
            return False

    return all(
        _in_range(getattr(weather, name), low, high)
        for name, (low, high) in WEATHER_LIMITS.items()
    )
