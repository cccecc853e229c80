"""Canonical records shared across ingestion, scoring and persistence."""

from .event import BallEvent
from .team import TeamEntry

__all__ = ["BallEvent", "TeamEntry"]
