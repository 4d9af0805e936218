"""Per-player return consistency record shared by the loader, pipeline and API."""

from __future__ import annotations

from operator import attrgetter
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from rcfpl.config.positions import Position, get_position
from rcfpl.config.settings import MIN_APPEARANCES_FOR_SCORE


class PlayerMetricRecord(BaseModel):
    """Aggregate return/blank/haul statistics for one player.

    Attribute names are pythonic; the aliases are the keys used by the
    published ``player-metrics.json`` dataset and by every export.
    """

    id: int
    name: str = Field(..., min_length=1, alias="web_name")
    team: str
    position: Position = Field(..., alias="element_type")
    appearances: int = Field(..., ge=0, alias="matches_counted")
    return_count: int = Field(..., ge=0, alias="returns_5plus_count")
    return_rate_raw: float = Field(..., ge=0.0, le=100.0)
    return_rate_smoothed: float = Field(..., ge=0.0, le=100.0, alias="return_rate_smooth")
    blank_count: int = Field(..., ge=0, alias="blanks_le2_count")
    blank_rate: float = Field(..., ge=0.0, le=100.0, alias="blanks_rate")
    haul_count: int = Field(..., ge=0, alias="hauls_10plus_count")
    points_average: float = Field(..., alias="points_avg")
    points_std_dev: float = Field(..., ge=0.0, alias="points_sd")
    consistency_score: float = Field(..., ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, value: Any) -> Any:
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            try:
                return get_position(value).position
            except KeyError:
                return value
        return value

    @model_validator(mode="after")
    def _check_counts(self) -> "PlayerMetricRecord":
        if self.return_count > self.appearances:
            raise ValueError("returns_5plus_count cannot exceed matches_counted")
        if self.blank_count > self.appearances:
            raise ValueError("blanks_le2_count cannot exceed matches_counted")
        if self.haul_count > self.return_count:
            raise ValueError("hauls_10plus_count cannot exceed returns_5plus_count")
        return self

    def is_low_sample(self, min_appearances: int = MIN_APPEARANCES_FOR_SCORE) -> bool:
        """Too few appearances for a consistency score."""

        return self.appearances < min_appearances


# (attribute, dataset key) in dataset column order.
RECORD_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("id", "id"),
    ("name", "web_name"),
    ("team", "team"),
    ("position", "element_type"),
    ("appearances", "matches_counted"),
    ("return_count", "returns_5plus_count"),
    ("return_rate_raw", "return_rate_raw"),
    ("return_rate_smoothed", "return_rate_smooth"),
    ("blank_count", "blanks_le2_count"),
    ("blank_rate", "blanks_rate"),
    ("haul_count", "hauls_10plus_count"),
    ("points_average", "points_avg"),
    ("points_std_dev", "points_sd"),
    ("consistency_score", "consistency_score"),
)

FieldAccessor = Callable[[PlayerMetricRecord], Any]


def _build_accessors() -> Mapping[str, FieldAccessor]:
    accessors: dict[str, FieldAccessor] = {}
    for attribute, key in RECORD_FIELDS:
        getter = attrgetter(attribute)
        accessors[attribute] = getter
        accessors[key] = getter
    return MappingProxyType(accessors)


FIELD_ACCESSORS: Mapping[str, FieldAccessor] = _build_accessors()


def resolve_field(field: str) -> FieldAccessor | None:
    """Return the accessor for an attribute name or dataset key, if known."""

    return FIELD_ACCESSORS.get(field)


def record_columns(record: PlayerMetricRecord) -> List[Tuple[str, FieldAccessor]]:
    """Dataset keys and accessors in the field order of ``record``'s model."""

    columns: List[Tuple[str, FieldAccessor]] = []
    for attribute, info in type(record).model_fields.items():
        key = info.alias or attribute
        columns.append((key, FIELD_ACCESSORS.get(key, attrgetter(attribute))))
    return columns
