"""
golfshot — command-line entry point.

Usage:
    golfshot --ball-speed 150 --launch-angle 12 --spin 2500
    golfshot --ball-speed 150 --launch-angle 12 --spin 2500 --spin-axis 5 --spin-direction left
    golfshot --ball-speed 120 --launch-angle 20 --ball-type "Range Ball"
    golfshot --ball-speed 150 --launch-angle 12 --spin 2500 --optimize
    golfshot --club-speed 95               # reference optimal launch window
    golfshot ... --temperature 30 --pressure 980 --humidity 60
"""

import argparse
import logging
import sys
from typing import Optional

from golfshot.ball_flight import calculate_trajectory, summarize_trajectory
from golfshot.models.ball import BallType
from golfshot.models.shot import ShotParameters, Side, WeatherConditions
from golfshot.optimization import optimal_parameters, optimize_launch_angle
from golfshot.utils.config import Config
from golfshot.validation import validate_shot_parameters, validate_weather_conditions

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="golfshot",
        description="Golf shot trajectory simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Launch conditions
    parser.add_argument("--ball-speed", type=float, help="Ball speed (mph)")
    parser.add_argument("--launch-angle", type=float, default=12.0,
                        help="Vertical launch angle in degrees (default: 12)")
    parser.add_argument("--launch-direction", type=float, default=0.0,
                        help="Horizontal launch angle in degrees (default: 0)")
    parser.add_argument("--direction-side", choices=[s.value for s in Side],
                        default=Side.RIGHT.value,
                        help="Side the launch direction points to (default: right)")
    parser.add_argument("--spin", type=float, default=None,
                        help="Spin rate in rpm (RPT Ball only)")
    parser.add_argument("--spin-axis", type=float, default=0.0,
                        help="Spin axis tilt in degrees (default: 0)")
    parser.add_argument("--spin-direction", choices=[s.value for s in Side],
                        default=Side.RIGHT.value,
                        help="Side the spin axis tilts to (default: right)")
    parser.add_argument("--ball-type", choices=[b.value for b in BallType], default=None,
                        help="Ball category (default: from config, RPT Ball)")

    # Weather
    parser.add_argument("--temperature", type=float, help="Air temperature (°C)")
    parser.add_argument("--pressure", type=float, help="Air pressure (hPa)")
    parser.add_argument("--humidity", type=float, help="Relative humidity (%%)")

    # Extras
    parser.add_argument("--optimize", action="store_true",
                        help="Also search for the carry-maximising launch angle")
    parser.add_argument("--club-speed", type=float,
                        help="Print the reference optimal launch window for a club speed (mph)")
    parser.add_argument("--points", action="store_true",
                        help="Print every trajectory point")
    parser.add_argument("--config", type=str, default=None,
                        help="Settings file (default: ~/.golfshot/config.json)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def _weather_from_args(args, config: Config) -> Optional[WeatherConditions]:
    if args.temperature is None and args.pressure is None and args.humidity is None:
        return config.weather()

    defaults = WeatherConditions()
    return WeatherConditions(
        temperature=defaults.temperature if args.temperature is None else args.temperature,
        air_pressure=defaults.air_pressure if args.pressure is None else args.pressure,
        humidity=defaults.humidity if args.humidity is None else args.humidity,
    )


def print_optimal(club_speed: float):
    optimal = optimal_parameters(club_speed)
    print(f"\n{'='*60}")
    print(f"  Reference launch window ({optimal.category}, {club_speed} mph club speed)")
    print(f"{'='*60}")
    print(f"  Launch Angle:   {optimal.launch_angle:.1f}°")
    print(f"  Spin Rate:      {optimal.spin_rate:.0f} rpm")
    print(f"  Ball Speed:     {optimal.ball_speed:.1f} mph")
    print(f"  Expected Carry: {optimal.expected_carry:.0f} yd")
    print(f"{'='*60}")


def print_shot(params: ShotParameters, points, show_points: bool = False):
    summary = summarize_trajectory(points)
    if show_points:
        print(f"{'t (s)':>8} {'x (m)':>9} {'y (m)':>8} {'z (m)':>8} {'v (m/s)':>8}")
        for p in points:
            print(f"{p.time:8.3f} {p.x:9.2f} {p.y:8.2f} {p.z:8.2f} {p.velocity:8.2f}")

    print(f"\n{'='*60}")
    print(f"  {BallType(params.ball_type).value}: {params.ball_speed} mph, "
          f"{params.launch_angle}° launch")
    print(f"{'='*60}")
    print(f"  Carry:          {summary.carry:.1f} m")
    print(f"  Total:          {summary.total:.1f} m")
    print(f"  Side:           {summary.side:.1f} m")
    print(f"  Apex:           {summary.apex:.1f} m")
    print(f"  Flight Time:    {summary.flight_time:.2f} s")
    print(f"  Landing Speed:  {summary.landing_speed:.1f} m/s")
    print(f"{'='*60}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = Config(args.config)

    if args.club_speed is not None:
        print_optimal(args.club_speed)
        if args.ball_speed is None:
            return 0

    if args.ball_speed is None:
        parser.print_usage()
        print("error: --ball-speed is required unless --club-speed is given")
        return EXIT_INVALID_INPUT

    params = ShotParameters(
        ball_speed=args.ball_speed,
        launch_angle=args.launch_angle,
        launch_direction=args.launch_direction,
        launch_direction_side=Side(args.direction_side),
        spin=args.spin,
        spin_axis=args.spin_axis,
        spin_direction=Side(args.spin_direction),
        ball_type=BallType(args.ball_type or config.get("ball_type")),
    )
    if not validate_shot_parameters(params):
        print(f"❌ Invalid shot parameters: {params}")
        return EXIT_INVALID_INPUT

    weather = _weather_from_args(args, config)
    if weather is not None and not validate_weather_conditions(weather):
        print(f"❌ Invalid weather conditions: {weather}")
        return EXIT_INVALID_INPUT

    physics = config.physics_config()
    settings = config.simulation_settings()

    points = calculate_trajectory(params, weather=weather, physics=physics, settings=settings)
    print_shot(params, points, show_points=args.points)

    if args.optimize:
        best = optimize_launch_angle(params, weather=weather, physics=physics, settings=settings)
        print(f"  Best Launch:    {best.launch_angle:.1f}° → {best.carry:.1f} m carry")

    return 0


if __name__ == "__main__":
    sys.exit(main())
