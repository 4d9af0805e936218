"""Compose the filter, sort and pagination stages."""

from __future__ import annotations

import logging
from typing import List, Sequence

from rcfpl.models import PlayerMetricRecord, QueryState

from .filtering import filter_records
from .pagination import PageResult, paginate
from .sorting import sort_records


logger = logging.getLogger(__name__)


def process_records(
    records: Sequence[PlayerMetricRecord],
    query: QueryState,
) -> List[PlayerMetricRecord]:
    """Filter then sort; the result is what pages are cut from."""

    filtered = filter_records(records, query)
    logger.debug(
        "Filtered %d/%d players (search=%r club=%r position=%r)",
        len(filtered),
        len(records),
        query.search_text,
        query.club_filter,
        query.position_filter,
    )
    return sort_records(filtered, query.sort_field, query.sort_direction)


def build_page(
    records: Sequence[PlayerMetricRecord],
    query: QueryState,
    page: int,
    page_size: int,
) -> PageResult:
    return paginate(process_records(records, query), page, page_size)


__all__ = [
    "build_page",
    "process_records",
]
