"""Pydantic models for API I/O."""

from .players import (
    PlayerPageResponse,
    PlayerRowResponse,
    ScoreMismatchResponse,
    ScoreValidationResponse,
    ViewSummaryResponse,
)

__all__ = [
    "PlayerPageResponse",
    "PlayerRowResponse",
    "ScoreMismatchResponse",
    "ScoreValidationResponse",
    "ViewSummaryResponse",
]
