"""
golfshot — golf ball flight and roll simulation.

Public entry points:
    validate_shot_parameters(params) -> bool
    calculate_trajectory(params) -> list[TrajectoryPoint]
"""

from golfshot.ball_flight import calculate_trajectory, simulate_shot, summarize_trajectory
from golfshot.models.ball import BallType
from golfshot.models.shot import ShotParameters, Side, TrajectoryPoint, WeatherConditions
from golfshot.validation import validate_shot_parameters, validate_weather_conditions

__all__ = [
    "BallType",
    "ShotParameters",
    "Side",
    "TrajectoryPoint",
    "WeatherConditions",
    "calculate_trajectory",
    "simulate_shot",
    "summarize_trajectory",
    "validate_shot_parameters",
    "validate_weather_conditions",
]
