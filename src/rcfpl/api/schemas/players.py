from __future__ import annotations

from typing import List

from pydantic import BaseModel

from rcfpl.models import PlayerMetricRecord


class PlayerRowResponse(PlayerMetricRecord):
    low_sample: bool


class PlayerPageResponse(BaseModel):
    items: List[PlayerRowResponse]
    current_page: int
    total_pages: int
    total_items: int
    page_size: int


class ViewSummaryResponse(BaseModel):
    total_players: int
    eligible_players: int
    low_sample_players: int
    club_count: int
    score_mean: float | None
    score_median: float | None
    score_std: float | None
    return_rate_mean: float | None


class ScoreMismatchResponse(BaseModel):
    player_id: int
    name: str
    stored: float
    expected: float


class ScoreValidationResponse(BaseModel):
    checked_players: int
    mismatches: List[ScoreMismatchResponse]
