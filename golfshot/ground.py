"""
Ground interaction model for golfshot.

Applied once, at first ground contact. The landing velocity is split into a
normal and a tangential part; the normal part bounces with a damped
coefficient, and the resulting roll speed is turned into a roll distance
against a friction that grows with landing steepness and speed.
"""

import math
from dataclasses import dataclass

from golfshot.models.ball import BallType
from golfshot.models.physics import DEFAULT_GROUND, GroundConfig
from golfshot.utils.constants import GRAVITY


@dataclass(frozen=True)
class RollOutcome:
    """Result of the bounce-and-roll model.

    Attributes:
        landing_speed: Speed at contact (m/s).
        landing_angle: Descent angle at contact (radians, negative = descending).
        bounce_coefficient: Effective coefficient after damping.
        roll_speed: Speed the ball starts rolling with (m/s).
        roll_distance: Distance rolled (m).
    """
    landing_speed: float
    landing_angle: float
    bounce_coefficient: float
    roll_speed: float
    roll_distance: float

    @property
    def offset(self) -> tuple[float, float]:
        """(dx, dz) from the contact point to the resting point."""
        return (self.roll_distance * math.cos(self.landing_angle),
                self.roll_distance * math.sin(self.landing_angle))


def effective_bounce_coefficient(landing_speed: float, landing_angle: float,
                                 config: GroundConfig = DEFAULT_GROUND) -> float:
    """Bounce coefficient damped for shallow and for fast landings.

    Both damping factors lie in [min_bounce_damping, 1].
    """
    coefficient = config.bounce_coefficient

    shallow = math.radians(config.shallow_landing_deg)
    steepness = abs(landing_angle)
    if steepness < shallow:
        floor = config.min_bounce_damping
        coefficient *= floor + (1.0 - floor) * steepness / shallow

    if landing_speed > config.fast_landing_speed:
        coefficient *= max(config.min_bounce_damping,
                           config.fast_landing_speed / landing_speed)

    return coefficient


def compute_roll(vx: float, vy: float, vz: float, spin_rate: float,
                 ball_type: BallType | str,
                 config: GroundConfig = DEFAULT_GROUND,
                 gravity: float = GRAVITY) -> RollOutcome:
    """Bounce and roll from the velocity at ground contact.

    Args:
        vx, vy, vz: Velocity components at contact (m/s).
        spin_rate: Spin rate (RPM); backspin shortens the roll of RPT balls.
        ball_type: Ball category.
        config: Ground tuning.
        gravity: Gravitational acceleration (m/s²).

    Returns:
        RollOutcome with the roll distance and landing geometry.
    """
    horizontal = math.sqrt(vx**2 + vz**2)
    landing_speed = math.sqrt(vx**2 + vy**2 + vz**2)
    landing_angle = math.atan2(vy, horizontal)

    normal_velocity = landing_speed * math.sin(landing_angle)
    tangential_velocity = landing_speed * math.cos(landing_angle)

    bounce = effective_bounce_coefficient(landing_speed, landing_angle, config)
    bounce_normal = normal_velocity * bounce

    roll_speed = (tangential_velocity * (1 - config.bounce_friction)
                  + bounce_normal * math.sin(landing_angle / 2))

    if BallType(ball_type).spin_responsive:
        spin_damping = (config.spin_roll_damping
                        * (spin_rate / config.reference_spin)
                        * math.exp(-abs(landing_angle)))
        roll_speed *= max(0.0, 1.0 - spin_damping)

    friction = (config.roll_friction
                * (1 + abs(math.sin(landing_angle)))
                * (1 + landing_speed / 100))
    roll_distance = max(0.0, roll_speed**2 / (2 * friction * gravity))

    return RollOutcome(
        landing_speed=landing_speed,
        landing_angle=landing_angle,
        bounce_coefficient=bounce,
        roll_speed=roll_speed,
        roll_distance=roll_distance,
    )
