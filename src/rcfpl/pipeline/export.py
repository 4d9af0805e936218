"""CSV export helpers for player metric views."""

from __future__ import annotations

import csv
from enum import Enum
from io import StringIO
from typing import Any, List, Sequence

from rcfpl.models import PlayerMetricRecord, record_columns


DISPLAY_ORDER: tuple[str, ...] = (
    "web_name",
    "team",
    "element_type",
    "matches_counted",
    "points_avg",
    "returns_5plus_count",
    "return_rate_raw",
    "return_rate_smooth",
    "blanks_le2_count",
    "blanks_rate",
    "hauls_10plus_count",
    "points_sd",
    "consistency_score",
)


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    return value


def to_delimited_text(records: Sequence[PlayerMetricRecord]) -> str:
    """Serialize records as CSV with a header row and CRLF row endings.

    Columns follow the field order of the first record. An empty input has no
    header to derive and yields an empty string.
    """

    if not records:
        return ""

    columns = record_columns(records[0])
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow([key for key, _ in columns])
    for record in records:
        writer.writerow([_cell(accessor(record)) for _, accessor in columns])
    return buffer.getvalue()


def display_headers(records: Sequence[PlayerMetricRecord]) -> List[str]:
    """Column keys in on-screen order, without ``id``, extras appended."""

    if not records:
        return []
    available = [key for key, _ in record_columns(records[0]) if key != "id"]
    ordered = [key for key in DISPLAY_ORDER if key in available]
    return ordered + [key for key in available if key not in DISPLAY_ORDER]


__all__ = [
    "DISPLAY_ORDER",
    "display_headers",
    "to_delimited_text",
]
