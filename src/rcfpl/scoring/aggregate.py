"""Turn per-appearance FPL points into the aggregate fields of a metric record."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from statistics import fmean, pstdev
from typing import Sequence

from rcfpl.config.positions import Position
from rcfpl.config.settings import (
    BLANK_POINTS_THRESHOLD,
    HAUL_POINTS_THRESHOLD,
    RETURN_POINTS_THRESHOLD,
)
from rcfpl.models import PlayerMetricRecord


@dataclass(frozen=True)
class AppearanceSummary:
    appearances: int
    return_count: int
    return_rate_raw: float
    return_rate_smoothed: float
    blank_count: int
    blank_rate: float
    haul_count: int
    points_average: float
    points_std_dev: float


def plus_four_rate(successes: int, trials: int) -> float:
    """Agresti-Caffo centre ``(x + 2) / (n + 4)`` as a percentage."""

    return 100.0 * (successes + 2) / (trials + 4)


def summarize_appearances(
    points: Sequence[float],
    minutes: Sequence[int] | None = None,
) -> AppearanceSummary:
    """Aggregate points scored in matches the player actually featured in.

    When ``minutes`` is given, only entries with minutes > 0 count as
    appearances.
    """

    if minutes is not None:
        if len(minutes) != len(points):
            raise ValueError("minutes length must match points length")
        points = [value for value, played in zip(points, minutes) if played > 0]
    values = [float(value) for value in points]

    appearances = len(values)
    returns = sum(1 for value in values if value >= RETURN_POINTS_THRESHOLD)
    blanks = sum(1 for value in values if value <= BLANK_POINTS_THRESHOLD)
    hauls = sum(1 for value in values if value >= HAUL_POINTS_THRESHOLD)

    return AppearanceSummary(
        appearances=appearances,
        return_count=returns,
        return_rate_raw=100.0 * returns / appearances if appearances else 0.0,
        return_rate_smoothed=plus_four_rate(returns, appearances),
        blank_count=blanks,
        blank_rate=100.0 * blanks / appearances if appearances else 0.0,
        haul_count=hauls,
        points_average=fmean(values) if values else 0.0,
        points_std_dev=pstdev(values) if len(values) > 1 else 0.0,
    )


def build_record(
    *,
    player_id: int,
    name: str,
    team: str,
    position: Position | str,
    points: Sequence[float],
    minutes: Sequence[int] | None = None,
) -> PlayerMetricRecord:
    """Build an unscored record; pass the pool through ``recompute_scores`` next."""

    summary = summarize_appearances(points, minutes)
    return PlayerMetricRecord(
        id=player_id,
        name=name,
        team=team,
        position=position,
        consistency_score=0.0,
        **asdict(summary),
    )
