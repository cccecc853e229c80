"""Pydantic models for API I/O."""

from .team import (
    ErrorResponse,
    ProcessResultResponse,
    TeamCreatedResponse,
    TeamEntryRequest,
    TeamEntryResponse,
)

__all__ = [
    "ErrorResponse",
    "ProcessResultResponse",
    "TeamCreatedResponse",
    "TeamEntryRequest",
    "TeamEntryResponse",
]
