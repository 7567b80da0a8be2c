"""Coarse position lookup for the granular roles used by the source dataset."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Mapping, Optional


class Position(str, Enum):
    GUARD = "G"
    FORWARD = "F"
    CENTER = "C"

    @property
    def label(self) -> str:
        return _POSITION_LABELS[self]


_POSITION_LABELS: Dict[Position, str] = {
    Position.GUARD: "Guards",
    Position.FORWARD: "Forwards",
    Position.CENTER: "Centers",
}

# Exact-match table; new roles must be added here explicitly.
_ROLE_POSITIONS: Dict[str, Position] = {
    "Pure PG": Position.GUARD,
    "Scoring PG": Position.GUARD,
    "Combo G": Position.GUARD,
    "Wing G": Position.GUARD,
    "Wing F": Position.FORWARD,
    "Stretch 4": Position.FORWARD,
    "PF/C": Position.FORWARD,
    "C": Position.CENTER,
}

POSITIONS: tuple[Position, ...] = (Position.GUARD, Position.FORWARD, Position.CENTER)

ROLE_POSITIONS: Mapping[str, Position] = dict(_ROLE_POSITIONS)


def iter_roles() -> Iterable[str]:
    """Return the granular roles with a known coarse position."""

    return _ROLE_POSITIONS.keys()


def position_for_role(role: str) -> Optional[Position]:
    """Resolve a granular role, returning None when it is not in the table."""

    return _ROLE_POSITIONS.get(role)


def parse_position(value: str) -> Position:
    """Parse "G"/"F"/"C" (any case), raising ValueError otherwise."""

    try:
        return Position(value.strip().upper())
    except ValueError:
        raise ValueError(f"Unknown position {value!r}; expected one of G, F, C") from None
