"""
Immutable configuration for the trajectory engine.

PhysicsConfig: constants and tuning used by the coefficient model and the
    equations of motion.
GroundConfig: bounce and roll coefficients.
SimulationSettings: time step, sampling and runaway cutoff.

Each has a module-level default instance. Callers wanting a different
tuning build a new instance (dataclasses.replace) instead of mutating one.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from golfshot.models.ball import BallCoefficients, BallType
from golfshot.utils import constants as C


def _default_ball_table() -> Mapping[BallType, BallCoefficients]:
    return MappingProxyType(
        {ball_type: BallCoefficients.from_type(ball_type) for ball_type in BallType}
    )


@dataclass(frozen=True)
class PhysicsConfig:
    """Physical constants and aerodynamic tuning."""

    gravity: float = C.GRAVITY
    air_density: float = C.AIR_DENSITY
    air_viscosity: float = C.AIR_VISCOSITY
    ball_mass: float = C.BALL_MASS
    ball_radius: float = C.BALL_RADIUS

    cd_zero: float = C.CD_ZERO
    cl_zero: float = C.CL_ZERO
    spin_lift_factor: float = C.SPIN_LIFT_FACTOR
    spin_drag_factor: float = C.SPIN_DRAG_FACTOR
    reference_spin: float = C.REFERENCE_SPIN_RPM

    re_laminar: float = C.RE_LAMINAR
    re_laminar_end: float = C.RE_LAMINAR_END
    re_turbulent: float = C.RE_TURBULENT
    re_turbulent_end: float = C.RE_TURBULENT_END
    laminar_drag_penalty: float = C.LAMINAR_DRAG_PENALTY
    turbulent_drag_reduction: float = C.TURBULENT_DRAG_REDUCTION

    # Attenuate density with height (see golfshot.atmosphere.air_density_at)
    altitude_density: bool = False

    ball_types: Mapping[BallType, BallCoefficients] = field(
        default_factory=_default_ball_table
    )

    @property
    def ball_area(self) -> float:
        return math.pi * self.ball_radius ** 2

    def coefficients(self, ball_type: BallType | str) -> BallCoefficients:
        """Multipliers for a ball type (raises ValueError for unknown names)."""
        return self.ball_types[BallType(ball_type)]


@dataclass(frozen=True)
class GroundConfig:
    """Bounce and roll tuning."""

    bounce_coefficient: float = C.BOUNCE_COEFFICIENT
    bounce_friction: float = C.BOUNCE_FRICTION
    roll_friction: float = C.ROLL_FRICTION
    shallow_landing_deg: float = C.SHALLOW_LANDING_DEG
    fast_landing_speed: float = C.FAST_LANDING_SPEED
    min_bounce_damping: float = C.MIN_BOUNCE_DAMPING
    spin_roll_damping: float = C.SPIN_ROLL_DAMPING
    reference_spin: float = C.REFERENCE_SPIN_RPM


@dataclass(frozen=True)
class SimulationSettings:
    """Integration step, output decimation and runaway cutoff."""

    time_step: float = C.TIME_STEP
    sample_every: int = C.SAMPLE_EVERY
    max_flight_time: float = C.MAX_FLIGHT_TIME


DEFAULT_PHYSICS = PhysicsConfig()
DEFAULT_GROUND = GroundConfig()
DEFAULT_SETTINGS = SimulationSettings()
