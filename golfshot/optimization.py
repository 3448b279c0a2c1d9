"""
Launch optimization for golfshot.

  - optimal_parameters: reference launch windows by club speed
    (Trackman / Ping study data), interpolated linearly.
  - carry_sweep: carry distance over a range of launch angles.
  - optimize_launch_angle: launch angle that maximises carry for otherwise
    fixed parameters, via scipy.optimize.minimize_scalar.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from scipy.optimize import minimize_scalar

from golfshot.ball_flight import calculate_trajectory
from golfshot.models.shot import ShotParameters
from golfshot.utils.constants import (
    DRIVER_MIN_CLUB_SPEED,
    FAIRWAY_MIN_CLUB_SPEED,
    MAX_LAUNCH_ANGLE_DEG,
    OPTIMAL_LAUNCH_WINDOWS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimalLaunch:
    """Reference launch conditions for a club speed.

    Attributes:
        category: "driver", "fairway" or "iron".
        launch_angle: Optimal launch angle (degrees).
        spin_rate: Optimal spin rate (RPM).
        ball_speed: Expected ball speed (mph).
        expected_carry: Expected carry (yards, as published).
    """
    category: str
    launch_angle: float
    spin_rate: float
    ball_speed: float
    expected_carry: float


@dataclass(frozen=True)
class LaunchAngleOptimum:
    """Best launch angle found for a shot and the carry it produces (m)."""
    launch_angle: float
    carry: float


def _club_category(club_speed: float) -> str:
    if club_speed >= DRIVER_MIN_CLUB_SPEED:
        return "driver"
    if club_speed >= FAIRWAY_MIN_CLUB_SPEED:
        return "fairway"
    return "iron"


def optimal_parameters(club_speed: float) -> OptimalLaunch:
    """Interpolate the reference launch window for a club speed (mph).

    The position of the club speed inside its category's speed window sets
    how far along each optimal range the result lies. Speeds outside the
    window extrapolate along the same line.
    """
    category = _club_category(club_speed)
    window = OPTIMAL_LAUNCH_WINDOWS[category]
    low, high = window["speed_range"]
    ratio = (club_speed - low) / (high - low)

    def lerp(bounds: tuple[float, float]) -> float:
        return bounds[0] + ratio * (bounds[1] - bounds[0])

    return OptimalLaunch(
        category=category,
        launch_angle=lerp(window["launch_angle"]),
        spin_rate=lerp(window["spin_rate"]),
        ball_speed=club_speed * window["smash_factor"],
        expected_carry=lerp(window["carry_yards"]),
    )


def _carry(params: ShotParameters, launch_angle: float, **kwargs) -> float:
    shot = dataclasses.replace(params, launch_angle=float(launch_angle))
    return calculate_trajectory(shot, **kwargs)[-1].carry


def carry_sweep(params: ShotParameters, angles: Iterable[float], **kwargs) -> np.ndarray:
    """Carry (m) for each launch angle (degrees), other parameters fixed.

    Args:
        params: Base shot; its launch angle is replaced for each entry.
        angles: Launch angles to simulate.
        **kwargs: Passed through to calculate_trajectory.

    Returns:
        Array of carries, same order as angles.
    """
    return np.array([_carry(params, angle, **kwargs) for angle in angles], dtype=float)


def optimize_launch_angle(
    params: ShotParameters,
    bounds: tuple[float, float] = (0.0, MAX_LAUNCH_ANGLE_DEG),
    tolerance: float = 0.05,
    **kwargs,
) -> LaunchAngleOptimum:
    """Find the launch angle that maximises carry.

    Carry is single-peaked in launch angle, so a bounded scalar search is
    enough.

    Args:
        params: Base shot; only the launch angle is varied.
        bounds: Search interval (degrees).
        tolerance: Absolute tolerance on the angle (degrees).
        **kwargs: Passed through to calculate_trajectory.

    Returns:
        LaunchAngleOptimum with the angle and its carry.
    """
    result = minimize_scalar(
        lambda angle: -_carry(params, angle, **kwargs),
        bounds=bounds,
        method="bounded",
        options={"xatol": tolerance},
    )

    if not result.success:
        logger.warning(f"Launch angle search did not converge: {result.message}")

    angle = float(result.x)
    carry = -float(result.fun)
    logger.info(
        f"Optimal launch angle {angle:.1f}° → carry {carry:.1f}m "
        f"(ball_speed={params.ball_speed}mph, spin={params.spin}rpm)"
    )
    return LaunchAngleOptimum(launch_angle=angle, carry=carry)
