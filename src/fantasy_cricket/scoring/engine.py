"""Scoring engine: maps a team roster and match events to fantasy points.

Every function here is pure. A ball is credited to a team at most once, in
the first role (batting, then bowling, then fielding) whose player is on the
roster.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from fantasy_cricket.models import BallEvent, TeamEntry
from fantasy_cricket.scoring import rules


@dataclass(frozen=True)
class PointsBreakdown:
    batting: int = 0
    bowling: int = 0
    fielding: int = 0
    credited_balls: int = 0

    @property
    def total(self) -> int:
        return self.batting + self.bowling + self.fielding


def calculate_batting_points(ball: BallEvent) -> int:
    runs = ball.runs_batter
    points = 0
    if runs > 0:
        points += runs
        if runs == 4:
            points += rules.BOUNDARY_BONUS
        if runs == 6:
            points += rules.SIX_BONUS
        # Milestones look at this ball's runs, not the innings total.
        if 30 <= runs < 50:
            points += rules.THIRTY_BONUS
        elif 50 <= runs < 100:
            points += rules.HALF_CENTURY_BONUS
        elif runs >= 100:
            points += rules.CENTURY_BONUS
    elif ball.dismissal in rules.DUCK_DISMISSALS:
        points += rules.DUCK_PENALTY
    return points


def calculate_bowling_points(ball: BallEvent) -> int:
    wickets = ball.wickets
    points = 0
    if wickets > 0:
        points += wickets * rules.WICKET_POINTS
        if ball.dismissal in rules.LBW_BOWLED_DISMISSALS:
            points += rules.LBW_BOWLED_BONUS
        if wickets >= 3:
            points += rules.THREE_WICKET_BONUS
        if wickets >= 4:
            points += rules.FOUR_WICKET_BONUS
        if wickets >= 5:
            points += rules.FIVE_WICKET_BONUS
    if ball.maiden:
        points += rules.MAIDEN_BONUS
    return points


def calculate_fielding_points(ball: BallEvent) -> int:
    points = 0
    if ball.dismissal == "caught":
        points += rules.CATCH_POINTS
        if ball.fielder == rules.KEEPER_FIELDER:
            points += rules.KEEPER_CATCH_BONUS
    elif ball.dismissal in rules.RUN_OUT_STUMPING_DISMISSALS:
        points += rules.RUN_OUT_STUMPING_POINTS
    return points


def score_breakdown(team: TeamEntry, match_data: Iterable[BallEvent]) -> PointsBreakdown:
    """Split a team's points by the role each ball was credited under."""

    roster = set(team.players)
    batting = bowling = fielding = credited_balls = 0
    for ball in match_data:
        if ball.batsman in roster:
            batting += calculate_batting_points(ball)
        elif ball.bowler in roster:
            bowling += calculate_bowling_points(ball)
        elif ball.fielder in roster:
            fielding += calculate_fielding_points(ball)
        else:
            continue
        credited_balls += 1
    return PointsBreakdown(
        batting=batting,
        bowling=bowling,
        fielding=fielding,
        credited_balls=credited_balls,
    )


def calculate_total_points(team: TeamEntry, match_data: Iterable[BallEvent]) -> int:
    return score_breakdown(team, match_data).total
