"""Record and query models."""

from .player import (
    FIELD_ACCESSORS,
    RECORD_FIELDS,
    FieldAccessor,
    PlayerMetricRecord,
    record_columns,
    resolve_field,
)
from .query import QueryState

__all__ = [
    "FIELD_ACCESSORS",
    "RECORD_FIELDS",
    "FieldAccessor",
    "PlayerMetricRecord",
    "QueryState",
    "record_columns",
    "resolve_field",
]
