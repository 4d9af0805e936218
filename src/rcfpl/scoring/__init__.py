"""Consistency score model and appearance aggregation."""

from .aggregate import AppearanceSummary, build_record, plus_four_rate, summarize_appearances
from .consistency import (
    NEUTRAL_PERCENTILE,
    ScoreBreakdown,
    ScoreMismatch,
    compute_breakdowns,
    percentile_rank,
    recompute_scores,
    validate_scores,
)

__all__ = [
    "AppearanceSummary",
    "NEUTRAL_PERCENTILE",
    "ScoreBreakdown",
    "ScoreMismatch",
    "build_record",
    "compute_breakdowns",
    "percentile_rank",
    "plus_four_rate",
    "recompute_scores",
    "summarize_appearances",
    "validate_scores",
]
