"""Aggregate statistics describing a filtered view of the player pool."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, median, pstdev
from typing import Iterable, Sequence

from rcfpl.config.settings import MIN_APPEARANCES_FOR_SCORE
from rcfpl.models import PlayerMetricRecord


@dataclass(frozen=True)
class ViewSummary:
    total_players: int
    eligible_players: int
    low_sample_players: int
    club_count: int
    score_mean: float | None
    score_median: float | None
    score_std: float | None
    return_rate_mean: float | None


def _safe_stats(values: Iterable[float]) -> tuple[float | None, float | None, float | None]:
    values = list(values)
    if not values:
        return None, None, None
    mean = fmean(values)
    med = median(values)
    std = pstdev(values) if len(values) > 1 else 0.0
    return mean, med, std


def summarize_records(
    records: Sequence[PlayerMetricRecord],
    *,
    min_appearances: int = MIN_APPEARANCES_FOR_SCORE,
) -> ViewSummary:
    """Counts plus score statistics over the records eligible for a score."""

    eligible = [record for record in records if not record.is_low_sample(min_appearances)]
    score_mean, score_median, score_std = _safe_stats(record.consistency_score for record in eligible)
    return_rate_mean, _, _ = _safe_stats(record.return_rate_smoothed for record in eligible)

    return ViewSummary(
        total_players=len(records),
        eligible_players=len(eligible),
        low_sample_players=len(records) - len(eligible),
        club_count=len({record.team for record in records if record.team}),
        score_mean=score_mean,
        score_median=score_median,
        score_std=score_std,
        return_rate_mean=return_rate_mean,
    )


__all__ = [
    "ViewSummary",
    "summarize_records",
]
