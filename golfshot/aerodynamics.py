"""
Aerodynamic coefficient model for golfshot.

Pure functions returning the drag and lift coefficients of a golf ball for
one integration step, given its speed, spin rate and ball type:

  - Drag: base C_D scaled by ball type, adjusted for the Reynolds-number
    regime, plus a spin term for spin-responsive balls.
  - Lift: fixed C_L for non-spin-responsive balls; for RPT balls C_L grows
    with the ratio of surface speed to translational speed.

Both functions return 0.0 for a ball that is not moving so the integrator
never sees NaN or infinity.
"""

import math
from typing import Optional

from golfshot.models.ball import BallType
from golfshot.models.physics import DEFAULT_PHYSICS, PhysicsConfig


def reynolds_number(velocity: float,
                    config: PhysicsConfig = DEFAULT_PHYSICS,
                    air_density: Optional[float] = None) -> float:
    """Reynolds number of the ball at the given speed (m/s)."""
    rho = config.air_density if air_density is None else air_density
    return velocity * 2 * config.ball_radius * rho / config.air_viscosity


def _reynolds_adjustment(re: float, config: PhysicsConfig) -> float:
    """Drag offset for the flow regime.

    Non-increasing in Re and continuous: a laminar penalty at low Re that
    fades out linearly, and a turbulent reduction at high Re that fades in
    linearly.
    """
    if re <= config.re_laminar:
        return config.laminar_drag_penalty
    if re < config.re_laminar_end:
        fraction = (config.re_laminar_end - re) / (config.re_laminar_end - config.re_laminar)
        return config.laminar_drag_penalty * fraction
    if re <= config.re_turbulent:
        return 0.0
    if re < config.re_turbulent_end:
        fraction = (re - config.re_turbulent) / (config.re_turbulent_end - config.re_turbulent)
        return -config.turbulent_drag_reduction * fraction
    return -config.turbulent_drag_reduction


def compute_drag(velocity: float, spin_rate: float, ball_type: BallType | str,
                 config: PhysicsConfig = DEFAULT_PHYSICS,
                 air_density: Optional[float] = None) -> float:
    """Drag coefficient C_D for the current step.

    Args:
        velocity: Ball speed in m/s.
        spin_rate: Spin rate in RPM (ignored unless the ball is RPT).
        ball_type: Ball category.
        config: Physics configuration.
        air_density: Local air density; defaults to config.air_density.

    Returns:
        C_D, or 0.0 when the ball is not moving.
    """
    if not math.isfinite(velocity) or velocity <= 0:
        return 0.0

    ball = config.coefficients(ball_type)
    cd = config.cd_zero * ball.drag
    cd += _reynolds_adjustment(reynolds_number(velocity, config, air_density), config)

    if ball.ball_type.spin_responsive:
        cd += (spin_rate / config.reference_spin) * config.spin_drag_factor

    return cd


def compute_lift(spin_rate: float, velocity: float, ball_type: BallType | str,
                 config: PhysicsConfig = DEFAULT_PHYSICS) -> float:
    """Lift coefficient C_L for the current step.

    For RPT balls the spin factor is the tangential surface speed over the
    ball speed, 2π·r·rpm / (60·v). Typical values run from ~0.05 (driver)
    to ~0.3 (wedge).

    Args:
        spin_rate: Spin rate in RPM.
        velocity: Ball speed in m/s.
        ball_type: Ball category.
        config: Physics configuration.

    Returns:
        C_L, or 0.0 when the ball is not moving.
    """
    if not math.isfinite(velocity) or velocity <= 0:
        return 0.0

    ball = config.coefficients(ball_type)
    if not ball.ball_type.spin_responsive:
        return config.cl_zero * ball.lift

    spin_factor = (2 * math.pi * config.ball_radius * spin_rate) / (60 * velocity)
    return (config.cl_zero + config.spin_lift_factor * spin_factor) * ball.lift
