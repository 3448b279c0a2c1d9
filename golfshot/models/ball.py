"""
Ball definitions for golfshot.

Provides the ball type enumeration and the fixed drag/lift multipliers
used by the aerodynamic coefficient model.
"""

from dataclasses import dataclass
from enum import Enum

from golfshot.utils.constants import BALL_TYPE_COEFFICIENTS


class BallType(str, Enum):
    """Supported ball categories."""
    RPT = "RPT Ball"
    RANGE = "Range Ball"
    PREMIUM = "Premium Ball"

    @property
    def spin_responsive(self) -> bool:
        """Only RPT balls react to spin rate and spin axis."""
        return self is BallType.RPT


@dataclass(frozen=True)
class BallCoefficients:
    """Drag and lift multipliers applied on top of the base coefficients."""

    ball_type: BallType
    drag: float
    lift: float

    @classmethod
    def from_type(cls, ball_type: BallType | str) -> "BallCoefficients":
        """Look up the standard multipliers for a ball type."""
        if isinstance(ball_type, str):
            ball_type = BallType(ball_type)
        drag, lift = BALL_TYPE_COEFFICIENTS[ball_type.value]
        return cls(ball_type=ball_type, drag=drag, lift=lift)
