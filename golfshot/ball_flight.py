"""
Ball flight trajectory engine for golfshot.

Two-state model:
  1. FLIGHT: fixed-step Euler integration of gravity, aerodynamic drag and
     Magnus lift until the ball drops below ground level (or the 15 s
     runaway cutoff is reached).
  2. GROUNDED: the bounce-and-roll model (golfshot.ground) is applied once
     to the contact velocity to find the resting position.

All unit and sign handling happens in normalize_shot; the integration loop
works purely in SI units with signed angles.

Coordinate system (meters):
    x = downrange, y = height, z = lateral (positive = right)
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from golfshot.aerodynamics import compute_drag, compute_lift
from golfshot.atmosphere import air_density_at
from golfshot.ground import compute_roll
from golfshot.models.ball import BallType
from golfshot.models.physics import (
    DEFAULT_GROUND,
    DEFAULT_PHYSICS,
    DEFAULT_SETTINGS,
    GroundConfig,
    PhysicsConfig,
    SimulationSettings,
)
from golfshot.models.shot import (
    ShotParameters,
    ShotSummary,
    TrajectoryPoint,
    WeatherConditions,
)
from golfshot.utils.constants import MPH_TO_MS
from golfshot.validation import validate_shot_parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchConditions:
    """Shot parameters normalized for integration.

    Angles are in radians and already signed (positive = right). Spin and
    spin axis are zero for balls that do not respond to spin.
    """
    speed: float
    launch_angle: float
    launch_direction: float
    spin_axis: float
    spin_rate: float
    ball_type: BallType
    # Values echoed on every trajectory point
    ball_speed_mph: float
    launch_angle_deg: float
    launch_direction_deg: float
    spin_axis_deg: float


def normalize_shot(params: ShotParameters) -> LaunchConditions:
    """Convert caller units (mph, degrees, sides) to SI with signed angles."""
    ball_type = BallType(params.ball_type)

    if ball_type.spin_responsive:
        spin_rate = float(params.spin or 0.0)
        spin_axis_deg = params.signed_spin_axis
    else:
        spin_rate = 0.0
        spin_axis_deg = 0.0

    launch_direction_deg = params.signed_launch_direction

    return LaunchConditions(
        speed=params.ball_speed * MPH_TO_MS,
        launch_angle=math.radians(params.launch_angle),
        launch_direction=math.radians(launch_direction_deg),
        spin_axis=math.radians(spin_axis_deg),
        spin_rate=spin_rate,
        ball_type=ball_type,
        ball_speed_mph=params.ball_speed,
        launch_angle_deg=params.launch_angle,
        launch_direction_deg=launch_direction_deg,
        spin_axis_deg=spin_axis_deg,
    )


def _aero_forces(velocity: float, launch: LaunchConditions,
                 physics: PhysicsConfig, rho: float) -> tuple[float, float]:
    """Drag and lift force magnitudes (N) at the given speed."""
    if velocity <= 0:
        return 0.0, 0.0
    cd = compute_drag(velocity, launch.spin_rate, launch.ball_type, physics, rho)
    cl = compute_lift(launch.spin_rate, velocity, launch.ball_type, physics)
    dynamic_pressure = 0.5 * rho * velocity**2 * physics.ball_area
    return dynamic_pressure * cd, dynamic_pressure * cl


def _point(launch: LaunchConditions, t: float, x: float, y: float, z: float,
           velocity: float, altitude: float, drag: float, lift: float,
           carry: Optional[float] = None, side: Optional[float] = None) -> TrajectoryPoint:
    distance = math.sqrt(x**2 + z**2)
    return TrajectoryPoint(
        time=t,
        x=x,
        y=y,
        z=z,
        velocity=velocity,
        spin=launch.spin_rate,
        altitude=altitude,
        distance=distance,
        total=distance,
        carry=x if carry is None else carry,
        side=z if side is None else side,
        drag=drag,
        lift=lift,
        launch_angle=launch.launch_angle_deg,
        launch_direction=launch.launch_direction_deg,
        spin_axis=launch.spin_axis_deg,
        ball_speed=launch.ball_speed_mph,
    )


def calculate_trajectory(
    params: ShotParameters,
    *,
    weather: Optional[WeatherConditions] = None,
    physics: PhysicsConfig = DEFAULT_PHYSICS,
    ground: GroundConfig = DEFAULT_GROUND,
    settings: SimulationSettings = DEFAULT_SETTINGS,
) -> list[TrajectoryPoint]:
    """Simulate the flight and roll of one shot.

    The caller is expected to have checked the parameters with
    validate_shot_parameters; they are not re-validated here.

    Args:
        params: Launch conditions.
        weather: Ambient conditions setting the sea-level air density.
            Defaults to standard air (physics.air_density).
        physics: Physical constants and aerodynamic tuning.
        ground: Bounce and roll tuning.
        settings: Time step, sampling interval and runaway cutoff.

    Returns:
        Sampled flight points (every settings.sample_every steps, starting
        at the origin) followed by one final point at the resting position.
    """
    launch = normalize_shot(params)
    sea_level_density = weather.air_density() if weather is not None else physics.air_density
    mass = physics.ball_mass
    dt = settings.time_step

    x = y = z = 0.0
    vx = launch.speed * math.cos(launch.launch_angle) * math.cos(launch.launch_direction)
    vy = launch.speed * math.sin(launch.launch_angle)
    vz = launch.speed * math.cos(launch.launch_angle) * math.sin(launch.launch_direction)

    # Fixed Magnus direction from the spin axis; not normalized and not
    # orthogonal to the velocity.
    lift_x = math.sin(launch.spin_axis)
    lift_y = math.cos(launch.spin_axis)
    lift_z = math.sin(launch.spin_axis) * math.cos(launch.launch_direction)

    points: list[TrajectoryPoint] = []
    apex = 0.0
    t = 0.0
    step = 0

    while y >= 0 and t < settings.max_flight_time:
        apex = max(apex, y)
        v = math.sqrt(vx**2 + vy**2 + vz**2)
        rho = air_density_at(y, sea_level_density) if physics.altitude_density else sea_level_density
        drag, lift = _aero_forces(v, launch, physics, rho)

        if step % settings.sample_every == 0:
            points.append(_point(launch, t, x, y, z, v, apex, drag, lift))

        if v > 0:
            ax = (-drag * vx / v + lift * lift_x) / mass
            ay = (-drag * vy / v + lift * lift_y) / mass - physics.gravity
            az = (-drag * vz / v + lift * lift_z) / mass
        else:
            ax, ay, az = 0.0, -physics.gravity, 0.0

        vx += ax * dt
        vy += ay * dt
        vz += az * dt

        x += vx * dt
        y += vy * dt
        z += vz * dt

        t += dt
        step += 1

    apex = max(apex, y)
    contact_speed = math.sqrt(vx**2 + vy**2 + vz**2)

    if y >= 0:
        # Runaway cutoff: no ground contact, keep the cutoff position.
        logger.warning(
            f"Flight did not return to ground within {settings.max_flight_time}s "
            f"(ball_speed={launch.ball_speed_mph}mph, "
            f"launch_angle={launch.launch_angle_deg}°, "
            f"spin={launch.spin_rate}rpm, type={launch.ball_type.value}); "
            f"using cutoff state at height {y:.1f}m"
        )
        rest_x, rest_z = x, z
    else:
        roll = compute_roll(vx, vy, vz, launch.spin_rate, launch.ball_type,
                            ground, physics.gravity)
        dx, dz = roll.offset
        rest_x, rest_z = x + dx, z + dz
        logger.debug(
            f"Ground contact at t={t:.3f}s: speed={roll.landing_speed:.1f}m/s, "
            f"angle={math.degrees(roll.landing_angle):.1f}°, "
            f"roll={roll.roll_distance:.1f}m"
        )

    final_drag, final_lift = _aero_forces(contact_speed, launch, physics, sea_level_density)
    points.append(_point(
        launch, t, rest_x, 0.0, rest_z, contact_speed, apex,
        final_drag, final_lift, carry=x, side=z,
    ))
    return points


def summarize_trajectory(points: list[TrajectoryPoint]) -> ShotSummary:
    """Read the headline numbers off the final point.

    An empty trajectory (no shot calculated yet) gives an all-zero summary.
    """
    if not points:
        return ShotSummary(carry=0.0, total=0.0, apex=0.0, side=0.0,
                           flight_time=0.0, landing_speed=0.0)

    final = points[-1]
    return ShotSummary(
        carry=final.carry,
        total=final.total,
        apex=final.altitude,
        side=final.side,
        flight_time=final.time,
        landing_speed=final.velocity,
    )


def simulate_shot(
    params: ShotParameters,
    weather: Optional[WeatherConditions] = None,
    **kwargs,
) -> tuple[list[TrajectoryPoint], ShotSummary]:
    """Full pipeline: validate → trajectory → summary.

    Args:
        params: Launch conditions.
        weather: Optional ambient conditions.
        **kwargs: physics / ground / settings overrides for calculate_trajectory.

    Returns:
        Tuple of (trajectory points, ShotSummary).

    Raises:
        ValueError: If the parameters fail validation.
    """
    if not validate_shot_parameters(params):
        raise ValueError(f"Shot parameters out of range: {params}")

    points = calculate_trajectory(params, weather=weather, **kwargs)
    summary = summarize_trajectory(points)

    logger.info(
        f"Shot computed: {BallType(params.ball_type).value} "
        f"ball_speed={params.ball_speed}mph, "
        f"launch_angle={params.launch_angle}°, "
        f"carry={summary.carry:.1f}m, "
        f"total={summary.total:.1f}m, "
        f"apex={summary.apex:.1f}m"
    )

    return points, summary
