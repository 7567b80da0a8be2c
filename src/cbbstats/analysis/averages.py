"""Position-level averages for each statistical domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Sequence

from cbbstats.analysis.grouping import GroupedPlayers, classify_role, group_by_position
from cbbstats.config.domains import DEFENSIVE, OFFENSIVE, PLAYMAKING, SHOOTING, DomainSchema, iter_domains
from cbbstats.config.positions import POSITIONS, Position
from cbbstats.models import PlayerSeasonRecord


StatAverages = Dict[str, float]
PositionAverages = Dict[Position, StatAverages]


def average_for(
    schema: DomainSchema,
    position: Position,
    bucket: Sequence[PlayerSeasonRecord],
) -> StatAverages:
    """Mean of every field in ``schema`` across one position bucket.

    An empty bucket yields 0.0 for every field rather than a missing value.
    """

    if not bucket:
        return {field: 0.0 for field in schema.fields}

    totals = {field: 0.0 for field in schema.fields}
    for player in bucket:
        for field in schema.fields:
            totals[field] += player.stat(field)
    count = len(bucket)
    return {field: total / count for field, total in totals.items()}


def position_averages(schema: DomainSchema, grouped: Mapping[Position, Sequence[PlayerSeasonRecord]]) -> PositionAverages:
    """Full G/F/C table for one domain from an existing grouping."""

    return {
        position: average_for(schema, position, grouped.get(position, ()))
        for position in POSITIONS
    }


@dataclass(frozen=True)
class AllAverages:
    shooting: PositionAverages
    defensive: PositionAverages
    playmaking: PositionAverages
    offensive: PositionAverages

    def for_domain(self, name: str) -> PositionAverages:
        return getattr(self, name)

    def as_dict(self) -> dict[str, dict[str, StatAverages]]:
        return {
            name: {position.value: dict(stats) for position, stats in table.items()}
            for name, table in (
                ("shooting", self.shooting),
                ("defensive", self.defensive),
                ("playmaking", self.playmaking),
                ("offensive", self.offensive),
            )
        }


def averages_from_groups(grouped: GroupedPlayers) -> AllAverages:
    return AllAverages(
        shooting=position_averages(SHOOTING, grouped),
        defensive=position_averages(DEFENSIVE, grouped),
        playmaking=position_averages(PLAYMAKING, grouped),
        offensive=position_averages(OFFENSIVE, grouped),
    )


def compute_all_averages(players: Iterable[PlayerSeasonRecord]) -> AllAverages:
    """Group the roster once and average all four domains from that grouping."""

    return averages_from_groups(group_by_position(players))


@dataclass(frozen=True)
class DomainComparison:
    """A player's domain stats next to their position average, field by field."""

    domain: str
    player_stats: StatAverages
    position_average: StatAverages
    differences: StatAverages


def compare_to_position_average(
    player: PlayerSeasonRecord,
    schema: DomainSchema,
    averages: AllAverages,
) -> Optional[DomainComparison]:
    """``player value - position average`` for every field of one domain.

    Returns None when the player's role has no position.
    """

    position = classify_role(player.role)
    if position is None:
        return None
    reference = averages.for_domain(schema.name)[position]
    player_stats = {field: player.stat(field) for field in schema.fields}
    return DomainComparison(
        domain=schema.name,
        player_stats=player_stats,
        position_average=dict(reference),
        differences={field: player_stats[field] - reference[field] for field in schema.fields},
    )


def compare_all_domains(player: PlayerSeasonRecord, averages: AllAverages) -> Dict[str, DomainComparison]:
    comparisons: Dict[str, DomainComparison] = {}
    for schema in iter_domains():
        comparison = compare_to_position_average(player, schema, averages)
        if comparison is not None:
            comparisons[schema.name] = comparison
    return comparisons
