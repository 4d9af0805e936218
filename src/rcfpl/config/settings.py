"""Application constants, score weights and environment overrides."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal


logger = logging.getLogger(__name__)

MIN_SEARCH_CHARS = 2
MIN_APPEARANCES_FOR_SCORE = 6
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 500
DEFAULT_SORT_BY = "consistency_score"
DEFAULT_SORT_ORDER: Literal["asc", "desc"] = "desc"
# Callers coalesce keystrokes before re-running the pipeline.
SEARCH_DEBOUNCE_DELAY_MS = 300
DEFAULT_SCORE_PRECISION = 0

RETURN_POINTS_THRESHOLD = 5
BLANK_POINTS_THRESHOLD = 2
HAUL_POINTS_THRESHOLD = 10

_DATA_PATH_ENV = "RCFPL_DATA_PATH"
_PAGE_SIZE_ENV = "RCFPL_PAGE_SIZE"
_MIN_APPEARANCES_ENV = "RCFPL_MIN_APPEARANCES"
_SCORE_PRECISION_ENV = "RCFPL_SCORE_PRECISION"


@dataclass(frozen=True)
class ScoreWeights:
    """Weights of the three consistency components; must sum to 1.0."""

    returns: float = 0.55
    volatility: float = 0.25
    blanks: float = 0.20

    def __post_init__(self) -> None:
        if min(self.returns, self.volatility, self.blanks) < 0:
            raise ValueError("score weights must be non-negative")
        total = self.returns + self.volatility + self.blanks
        if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=1e-12):
            raise ValueError(f"score weights must sum to 1.0, got {total!r}")


DEFAULT_WEIGHTS = ScoreWeights()


@dataclass(frozen=True)
class Settings:
    data_path: Path | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    min_appearances: int = MIN_APPEARANCES_FOR_SCORE
    score_precision: int = DEFAULT_SCORE_PRECISION
    default_sort_by: str = DEFAULT_SORT_BY
    default_sort_order: Literal["asc", "desc"] = DEFAULT_SORT_ORDER
    weights: ScoreWeights = field(default_factory=ScoreWeights)


def _env_int(name: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def load_settings() -> Settings:
    """Build settings from ``RCFPL_*`` environment variables."""

    raw_path = os.getenv(_DATA_PATH_ENV)
    return Settings(
        data_path=Path(raw_path) if raw_path else None,
        page_size=_env_int(_PAGE_SIZE_ENV, DEFAULT_PAGE_SIZE, min_value=1, max_value=MAX_PAGE_SIZE),
        min_appearances=_env_int(_MIN_APPEARANCES_ENV, MIN_APPEARANCES_FOR_SCORE, min_value=1),
        score_precision=_env_int(_SCORE_PRECISION_ENV, DEFAULT_SCORE_PRECISION, min_value=0, max_value=6),
    )
