"""Role classification and roster partitioning by coarse position."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from cbbstats.config.positions import POSITIONS, Position, position_for_role
from cbbstats.models import PlayerSeasonRecord


GroupedPlayers = Dict[Position, List[PlayerSeasonRecord]]


def classify_role(role: str) -> Optional[Position]:
    """Map a granular role to G/F/C, or None when the role is unknown."""

    return position_for_role(role)


def group_by_position(players: Iterable[PlayerSeasonRecord]) -> GroupedPlayers:
    """Partition players into G/F/C buckets.

    Every bucket is present even when empty, input order is kept within a
    bucket, and players with an unknown role land in no bucket at all.
    """

    grouped: GroupedPlayers = {position: [] for position in POSITIONS}
    for player in players:
        position = classify_role(player.role)
        if position is None:
            continue
        grouped[position].append(player)
    return grouped
