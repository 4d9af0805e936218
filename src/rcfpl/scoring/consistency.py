"""Percentile-based consistency score.

Each player with enough appearances is ranked against the other eligible
players on three components:

* smoothed return rate (higher is better),
* points standard deviation (lower is better),
* blank rate (lower is better).

Ranks are mid-rank percentiles in ``[0, 100]`` and are blended with
:class:`~rcfpl.config.settings.ScoreWeights`. Players below the appearance
threshold score ``0`` and are reported as low sample.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from rcfpl.config.settings import (
    DEFAULT_SCORE_PRECISION,
    DEFAULT_WEIGHTS,
    MIN_APPEARANCES_FOR_SCORE,
    ScoreWeights,
)
from rcfpl.models import PlayerMetricRecord


logger = logging.getLogger(__name__)

NEUTRAL_PERCENTILE = 50.0


@dataclass(frozen=True)
class ScoreBreakdown:
    player_id: int
    eligible: bool
    return_component: float
    volatility_component: float
    blank_component: float
    composite: float
    score: float


@dataclass(frozen=True)
class ScoreMismatch:
    player_id: int
    name: str
    stored: float
    expected: float

    @property
    def difference(self) -> float:
        return self.stored - self.expected


def percentile_rank(value: float, population: Iterable[float]) -> float:
    """Share of ``population`` below ``value`` plus half the share equal to it.

    An empty population has no ranking information and yields 50.
    """

    population = list(population)
    if not population:
        return NEUTRAL_PERCENTILE
    below = sum(1 for other in population if other < value)
    equal = sum(1 for other in population if other == value)
    return 100.0 * (below + 0.5 * equal) / len(population)


def _ranks_against_others(values: Sequence[float]) -> List[float]:
    # Same as percentile_rank(value, values without that entry), one sort total.
    ordered = sorted(values)
    others = len(ordered) - 1
    if others <= 0:
        return [NEUTRAL_PERCENTILE] * len(values)
    ranks: List[float] = []
    for value in values:
        below = bisect_left(ordered, value)
        equal = bisect_right(ordered, value) - below - 1
        ranks.append(100.0 * (below + 0.5 * equal) / others)
    return ranks


def _round_half_up(value: float, precision: int) -> float:
    factor = 10 ** precision
    return math.floor(value * factor + 0.5) / factor


def compute_breakdowns(
    records: Sequence[PlayerMetricRecord],
    *,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    min_appearances: int = MIN_APPEARANCES_FOR_SCORE,
    precision: int = DEFAULT_SCORE_PRECISION,
) -> List[ScoreBreakdown]:
    """Return one breakdown per record, in input order."""

    eligible = [index for index, record in enumerate(records) if not record.is_low_sample(min_appearances)]
    return_ranks = _ranks_against_others([records[index].return_rate_smoothed for index in eligible])
    volatility_ranks = _ranks_against_others([-records[index].points_std_dev for index in eligible])
    blank_ranks = _ranks_against_others([-records[index].blank_rate for index in eligible])

    components = {
        index: (ret, vol, blank)
        for index, ret, vol, blank in zip(eligible, return_ranks, volatility_ranks, blank_ranks)
    }

    breakdowns: List[ScoreBreakdown] = []
    for index, record in enumerate(records):
        ranks = components.get(index)
        if ranks is None:
            breakdowns.append(
                ScoreBreakdown(
                    player_id=record.id,
                    eligible=False,
                    return_component=0.0,
                    volatility_component=0.0,
                    blank_component=0.0,
                    composite=0.0,
                    score=0.0,
                )
            )
            continue
        ret, vol, blank = ranks
        composite = weights.returns * ret + weights.volatility * vol + weights.blanks * blank
        breakdowns.append(
            ScoreBreakdown(
                player_id=record.id,
                eligible=True,
                return_component=ret,
                volatility_component=vol,
                blank_component=blank,
                composite=composite,
                score=_round_half_up(composite, precision),
            )
        )
    return breakdowns


def recompute_scores(
    records: Sequence[PlayerMetricRecord],
    *,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    min_appearances: int = MIN_APPEARANCES_FOR_SCORE,
    precision: int = DEFAULT_SCORE_PRECISION,
) -> List[PlayerMetricRecord]:
    """Return copies of ``records`` carrying freshly computed scores."""

    breakdowns = compute_breakdowns(
        records,
        weights=weights,
        min_appearances=min_appearances,
        precision=precision,
    )
    return [
        record.model_copy(update={"consistency_score": breakdown.score})
        for record, breakdown in zip(records, breakdowns)
    ]


def validate_scores(
    records: Sequence[PlayerMetricRecord],
    *,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    min_appearances: int = MIN_APPEARANCES_FOR_SCORE,
    precision: int = DEFAULT_SCORE_PRECISION,
) -> List[ScoreMismatch]:
    """List records whose stored score differs from the recomputed one.

    Stored scores within half a unit of the last kept digit are accepted;
    low-sample records must store exactly 0.
    """

    tolerance = 0.5 * 10 ** (-precision) + 1e-9
    breakdowns = compute_breakdowns(
        records,
        weights=weights,
        min_appearances=min_appearances,
        precision=precision,
    )
    mismatches: List[ScoreMismatch] = []
    for record, breakdown in zip(records, breakdowns):
        if breakdown.eligible:
            disagrees = abs(record.consistency_score - breakdown.composite) > tolerance
        else:
            disagrees = record.consistency_score != 0.0
        if disagrees:
            mismatches.append(
                ScoreMismatch(
                    player_id=record.id,
                    name=record.name,
                    stored=record.consistency_score,
                    expected=breakdown.score,
                )
            )
    if mismatches:
        logger.warning("%d of %d consistency scores disagree with recomputation", len(mismatches), len(records))
    return mismatches
