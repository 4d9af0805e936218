"""Persist and load CLI query profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rcfpl.config.settings import DEFAULT_SORT_BY, DEFAULT_SORT_ORDER
from rcfpl.models import QueryState


@dataclass
class QueryProfile:
    search: str = ""
    club: Optional[str] = None
    position: Optional[str] = None
    sort_by: str = DEFAULT_SORT_BY
    sort_direction: str = DEFAULT_SORT_ORDER

    @classmethod
    def load(cls, path: Path) -> "QueryProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            search=data.get("search", ""),
            club=data.get("club"),
            position=data.get("position"),
            sort_by=data.get("sort_by", DEFAULT_SORT_BY),
            sort_direction=data.get("sort_direction", DEFAULT_SORT_ORDER),
        )

    def save(self, path: Path) -> None:
        payload = {
            "search": self.search,
            "club": self.club,
            "position": self.position,
            "sort_by": self.sort_by,
            "sort_direction": self.sort_direction,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def to_query(self) -> QueryState:
        direction = "asc" if self.sort_direction == "asc" else "desc"
        return QueryState(
            search_text=self.search,
            club_filter=self.club or None,
            position_filter=self.position or None,
            sort_field=self.sort_by,
            sort_direction=direction,
        )
