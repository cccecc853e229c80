"""Fantasy-points rubric applied to ball-by-ball match data."""

from .engine import (
    PointsBreakdown,
    calculate_batting_points,
    calculate_bowling_points,
    calculate_fielding_points,
    calculate_total_points,
    score_breakdown,
)

__all__ = [
    "PointsBreakdown",
    "calculate_batting_points",
    "calculate_bowling_points",
    "calculate_fielding_points",
    "calculate_total_points",
    "score_breakdown",
]
