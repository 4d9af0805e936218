"""Caller-owned query state driving the processing pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from rcfpl.config.positions import Position
from rcfpl.config.settings import DEFAULT_SORT_BY, DEFAULT_SORT_ORDER


@dataclass(frozen=True)
class QueryState:
    """Search, filter and sort selections for one view of the dataset."""

    search_text: str = ""
    club_filter: str | None = None
    position_filter: Position | str | None = None
    sort_field: str = DEFAULT_SORT_BY
    sort_direction: Literal["asc", "desc"] = DEFAULT_SORT_ORDER

    @property
    def is_default(self) -> bool:
        return (
            not self.search_text
            and not self.club_filter
            and not self.position_filter
            and self.sort_field == DEFAULT_SORT_BY
            and self.sort_direction == DEFAULT_SORT_ORDER
        )
