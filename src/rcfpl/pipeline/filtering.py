"""Helpers for narrowing the player pool by name, club and position."""

from __future__ import annotations

from typing import Callable, List, Sequence

from rcfpl.config.settings import MIN_SEARCH_CHARS
from rcfpl.models import PlayerMetricRecord, QueryState


Predicate = Callable[[PlayerMetricRecord], bool]


def _search_predicate(search_text: str) -> Predicate | None:
    if len(search_text) < MIN_SEARCH_CHARS:
        return None
    needle = search_text.casefold()
    return lambda record: needle in (record.name or "").casefold()


def _club_predicate(club: str | None) -> Predicate | None:
    if not club:
        return None
    return lambda record: record.team == club


def _position_predicate(position: str | None) -> Predicate | None:
    if not position:
        return None
    return lambda record: record.position == position


def active_predicates(query: QueryState) -> List[Predicate]:
    """Return the predicates a query activates, in application order."""

    candidates = (
        _search_predicate(query.search_text),
        _club_predicate(query.club_filter),
        _position_predicate(query.position_filter),
    )
    return [predicate for predicate in candidates if predicate is not None]


def filter_records(
    records: Sequence[PlayerMetricRecord],
    query: QueryState,
) -> List[PlayerMetricRecord]:
    """Keep records matching every active predicate, preserving input order."""

    predicates = active_predicates(query)
    if not predicates:
        return list(records)
    return [record for record in records if all(predicate(record) for predicate in predicates)]


__all__ = [
    "Predicate",
    "active_predicates",
    "filter_records",
]
