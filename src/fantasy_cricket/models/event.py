"""Ball-by-ball match events consumed by the scoring engine."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, ValidationInfo, field_validator
from pydantic.config import ConfigDict


logger = logging.getLogger(__name__)

_TRUE_FLAGS = {"1", "true", "t", "yes", "y"}


def _coerce_count(value: Any, field: str) -> int:
    # Missing or malformed counts score as zero instead of failing the feed.
    if value is None or isinstance(value, bool):
        return int(bool(value))
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return 0
        try:
            number = float(text)
        except (ValueError, OverflowError):
            number = math.nan
    if not math.isfinite(number):
        logger.warning("Treating non-numeric %s=%r as 0", field, value)
        return 0
    return int(number)


def _coerce_flag(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in _TRUE_FLAGS


def _coerce_name(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class BallEvent(BaseModel):
    """One delivery's outcome.

    Absent numeric fields default to zero and an absent ``maiden`` flag to
    ``False``. This mirrors how the feed has always been scored: a gap in the
    data under-scores the ball, it never rejects it.
    """

    batsman: Optional[str] = None
    bowler: Optional[str] = None
    fielder: Optional[str] = None
    runs_batter: int = 0
    wickets: int = 0
    dismissal: Optional[str] = None
    maiden: bool = False

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("batsman", "bowler", "fielder", mode="before")
    @classmethod
    def _names(cls, value: Any) -> Optional[str]:
        return _coerce_name(value)

    @field_validator("dismissal", mode="before")
    @classmethod
    def _dismissal(cls, value: Any) -> Optional[str]:
        text = _coerce_name(value)
        # Normalised so "Bowled" and "bowled" score alike.
        return text.lower() if text else None

    @field_validator("runs_batter", "wickets", mode="before")
    @classmethod
    def _counts(cls, value: Any, info: ValidationInfo) -> int:
        return _coerce_count(value, info.field_name)

    @field_validator("maiden", mode="before")
    @classmethod
    def _maiden(cls, value: Any) -> bool:
        return _coerce_flag(value)
