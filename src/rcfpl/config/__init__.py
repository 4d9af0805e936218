"""Configuration helpers for positions, scoring weights and app settings."""

from .positions import Position, PositionInfo, get_position, iter_positions
from .settings import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    DEFAULT_WEIGHTS,
    MAX_PAGE_SIZE,
    MIN_APPEARANCES_FOR_SCORE,
    MIN_SEARCH_CHARS,
    SEARCH_DEBOUNCE_DELAY_MS,
    ScoreWeights,
    Settings,
    load_settings,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SORT_BY",
    "DEFAULT_SORT_ORDER",
    "DEFAULT_WEIGHTS",
    "MAX_PAGE_SIZE",
    "MIN_APPEARANCES_FOR_SCORE",
    "MIN_SEARCH_CHARS",
    "SEARCH_DEBOUNCE_DELAY_MS",
    "Position",
    "PositionInfo",
    "ScoreWeights",
    "Settings",
    "get_position",
    "iter_positions",
    "load_settings",
]
