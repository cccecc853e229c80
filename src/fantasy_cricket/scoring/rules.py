"""Point values used by the scoring engine."""

from __future__ import annotations

# Batting
BOUNDARY_BONUS = 1
SIX_BONUS = 2
THIRTY_BONUS = 4
HALF_CENTURY_BONUS = 8
CENTURY_BONUS = 16
DUCK_PENALTY = -2

# Bowling
WICKET_POINTS = 25
LBW_BOWLED_BONUS = 8
THREE_WICKET_BONUS = 4
FOUR_WICKET_BONUS = 8
FIVE_WICKET_BONUS = 16
MAIDEN_BONUS = 12

# Fielding
CATCH_POINTS = 8
KEEPER_CATCH_BONUS = 12
RUN_OUT_STUMPING_POINTS = 6

# Compared against the fielder name itself, not a role field.
KEEPER_FIELDER = "keeper"

DUCK_DISMISSALS = frozenset({"bowled", "lbw"})
LBW_BOWLED_DISMISSALS = frozenset({"lbw", "bowled"})
RUN_OUT_STUMPING_DISMISSALS = frozenset({"run out", "stumping"})
