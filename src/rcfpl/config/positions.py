"""Position registry for the four FPL element types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Union


class Position(str, Enum):
    GOALKEEPER = "GKP"
    DEFENDER = "DEF"
    MIDFIELDER = "MID"
    FORWARD = "FWD"


@dataclass(frozen=True)
class PositionInfo:
    position: Position
    label: str
    full_name: str
    element_type_id: int


_POSITIONS: Dict[Position, PositionInfo] = {
    Position.GOALKEEPER: PositionInfo(
        position=Position.GOALKEEPER,
        label="GK",
        full_name="Goalkeeper",
        element_type_id=1,
    ),
    Position.DEFENDER: PositionInfo(
        position=Position.DEFENDER,
        label="DEF",
        full_name="Defender",
        element_type_id=2,
    ),
    Position.MIDFIELDER: PositionInfo(
        position=Position.MIDFIELDER,
        label="MID",
        full_name="Midfielder",
        element_type_id=3,
    ),
    Position.FORWARD: PositionInfo(
        position=Position.FORWARD,
        label="FWD",
        full_name="Forward",
        element_type_id=4,
    ),
}

_ALIASES: Dict[str, Position] = {}
for _info in _POSITIONS.values():
    _ALIASES[_info.position.value] = _info.position
    _ALIASES[_info.label.upper()] = _info.position
    _ALIASES[_info.full_name.upper()] = _info.position
    _ALIASES[str(_info.element_type_id)] = _info.position


def iter_positions() -> Iterable[PositionInfo]:
    """Return position metadata in squad order (GKP, DEF, MID, FWD)."""

    return _POSITIONS.values()


def get_position(code: Union[str, int, Position]) -> PositionInfo:
    """Resolve a position code, label, full name or FPL element type id.

    Raises KeyError when the value does not name a position.
    """

    if isinstance(code, Position):
        return _POSITIONS[code]
    key = str(code).strip().upper()
    if key not in _ALIASES:
        raise KeyError(f"Unknown position {code!r}")
    return _POSITIONS[_ALIASES[key]]
