"""Page slicing for an already ordered record list."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from rcfpl.models import PlayerMetricRecord


@dataclass(frozen=True)
class PageResult:
    """One page of a processed view plus the counts needed to navigate it."""

    items: list[PlayerMetricRecord]
    current_page: int
    page_count: int
    total_item_count: int
    page_size: int

    @property
    def first_item_number(self) -> int:
        if not self.items:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_item_number(self) -> int:
        if not self.items:
            return 0
        return self.first_item_number + len(self.items) - 1


def paginate(
    records: Sequence[PlayerMetricRecord],
    requested_page: int,
    page_size: int,
) -> PageResult:
    """Slice ``records`` into a page, clamping ``requested_page`` into range."""

    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total = len(records)
    page_count = max(1, math.ceil(total / page_size))
    current_page = max(1, min(requested_page, page_count))
    start = (current_page - 1) * page_size
    return PageResult(
        items=list(records[start : start + page_size]),
        current_page=current_page,
        page_count=page_count,
        total_item_count=total,
        page_size=page_size,
    )


__all__ = [
    "PageResult",
    "paginate",
]
