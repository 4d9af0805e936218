"""Stable column sorting with a numeric path and an accent-insensitive text fallback."""

from __future__ import annotations

import math
import unicodedata
from enum import Enum
from functools import cmp_to_key
from typing import Any, List, Literal, Sequence, Tuple

from rcfpl.models import PlayerMetricRecord, resolve_field


# Letters NFKD leaves whole; mapped to the base letter they collate with.
_UNDECOMPOSED = str.maketrans(
    {
        "ø": "o",
        "æ": "ae",
        "œ": "oe",
        "ð": "d",
        "þ": "th",
        "ł": "l",
        "đ": "d",
        "ı": "i",
    }
)


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).casefold()


def collation_key(value: Any) -> Tuple[str, str]:
    """Sort key for the text path: accent-stripped base letters, then the folded text.

    ``"Ćolak"`` sorts with ``"colak"`` and ``"Ødegaard"`` with ``"odegaard"``;
    names that differ only by accents fall back to the folded text.
    """

    folded = _as_text(value)
    decomposed = unicodedata.normalize("NFKD", folded.translate(_UNDECOMPOSED))
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base, folded


def compare_values(left: Any, right: Any) -> int:
    """Ascending three-way comparison of two column values.

    Both values numeric compares as numbers; otherwise both are compared as
    case-folded text with accents ignored (see :func:`collation_key`).
    ``None`` is treated as the empty string.
    """

    left_number = _as_number(left)
    right_number = _as_number(right)
    if left_number is not None and right_number is not None:
        return (left_number > right_number) - (left_number < right_number)

    left_key = collation_key(left)
    right_key = collation_key(right)
    return (left_key > right_key) - (left_key < right_key)


def sort_records(
    records: Sequence[PlayerMetricRecord],
    field: str,
    direction: Literal["asc", "desc"] = "desc",
) -> List[PlayerMetricRecord]:
    """Return records ordered by ``field``; ties keep their input order.

    Unknown fields leave the order untouched.
    """

    accessor = resolve_field(field)
    if accessor is None:
        return list(records)

    sign = -1 if direction == "desc" else 1

    def _compare(left: PlayerMetricRecord, right: PlayerMetricRecord) -> int:
        return sign * compare_values(accessor(left), accessor(right))

    return sorted(records, key=cmp_to_key(_compare))


__all__ = [
    "collation_key",
    "compare_values",
    "sort_records",
]
