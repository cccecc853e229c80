"""Configuration helpers for contest rules and runtime settings."""

from .contest import DEFAULT_RULES, ContestRules
from .settings import Settings

__all__ = [
    "ContestRules",
    "DEFAULT_RULES",
    "Settings",
]
