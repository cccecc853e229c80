"""Contest operations built on a team repository and the scoring engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from fantasy_cricket.config import DEFAULT_RULES, ContestRules
from fantasy_cricket.models import BallEvent, TeamEntry
from fantasy_cricket.persistence import TeamRepository
from fantasy_cricket.scoring import calculate_total_points


logger = logging.getLogger(__name__)


class TeamValidationError(ValueError):
    """Raised when a submitted team breaks a roster rule."""


@dataclass(frozen=True)
class ProcessSummary:
    teams_processed: int
    balls: int


def validate_team(entry: TeamEntry, rules: ContestRules = DEFAULT_RULES) -> None:
    if len(entry.players) != rules.roster_size:
        raise TeamValidationError(rules.roster_size_message)
    if entry.captain not in entry.players or entry.vice_captain not in entry.players:
        raise TeamValidationError(rules.leadership_message)


def submit_team(
    store: TeamRepository,
    entry: TeamEntry,
    *,
    rules: ContestRules = DEFAULT_RULES,
) -> TeamEntry:
    """Validate ``entry`` and persist it with a zero score."""

    validate_team(entry, rules)
    stored = store.create(entry.model_copy(update={"team_id": None, "total_points": 0}))
    logger.info("Stored team %s (%s)", stored.team_id, stored.team_name)
    return stored


def process_results(store: TeamRepository, match_data: Sequence[BallEvent]) -> ProcessSummary:
    """Rescore every stored team against ``match_data``.

    Each team is written independently; if a write fails the teams already
    updated keep their new totals and the error propagates.
    """

    teams = store.list()
    for team in teams:
        total = calculate_total_points(team, match_data)
        store.update(team.model_copy(update={"total_points": total}))
        logger.debug("Team %s scored %d", team.team_id, total)
    summary = ProcessSummary(teams_processed=len(teams), balls=len(match_data))
    logger.info(
        "Processed %d teams against %d balls", summary.teams_processed, summary.balls
    )
    return summary


def leaderboard(store: TeamRepository) -> List[TeamEntry]:
    """Return every team sharing the highest total, best first."""

    teams = store.list_sorted()
    if not teams:
        return []
    top_score = teams[0].total_points
    return [team for team in teams if team.total_points == top_score]
