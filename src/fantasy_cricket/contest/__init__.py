"""Contest operations: team submission, result processing and leaderboard."""

from .service import (
    ProcessSummary,
    TeamValidationError,
    leaderboard,
    process_results,
    submit_team,
    validate_team,
)

__all__ = [
    "ProcessSummary",
    "TeamValidationError",
    "leaderboard",
    "process_results",
    "submit_team",
    "validate_team",
]
