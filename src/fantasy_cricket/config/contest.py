"""Rules that every submitted team entry must satisfy."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContestRules:
    roster_size: int = 11
    roster_size_message: str = "A team must have 11 players"
    leadership_message: str = "Captain or vice-captain not found in players list"


DEFAULT_RULES = ContestRules()
