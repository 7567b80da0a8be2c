"""Field lists for the four statistical domains averaged per position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class DomainSchema:
    name: str
    fields: Tuple[str, ...]


SHOOTING = DomainSchema(
    name="shooting",
    fields=("eFG", "TS_per", "TP_per", "twoP_per", "FT_per"),
)

DEFENSIVE = DomainSchema(
    name="defensive",
    fields=("stl_per", "blk_per", "DRB_per", "drtg", "dbpm"),
)

PLAYMAKING = DomainSchema(
    name="playmaking",
    fields=("AST_per", "TO_per", "astTov", "usg"),
)

OFFENSIVE = DomainSchema(
    name="offensive",
    fields=("ORtg", "usg", "bpm", "pts", "ftr", "ORB_per"),
)

_DOMAINS: Dict[str, DomainSchema] = {
    schema.name: schema for schema in (SHOOTING, DEFENSIVE, PLAYMAKING, OFFENSIVE)
}


def iter_domains() -> Iterable[DomainSchema]:
    """Return the domains in display order."""

    return _DOMAINS.values()


def get_domain(name: str) -> DomainSchema:
    """Fetch a domain schema by name, raising KeyError if missing."""

    key = name.lower()
    if key not in _DOMAINS:
        raise KeyError(f"No statistical domain named {name!r}")
    return _DOMAINS[key]
