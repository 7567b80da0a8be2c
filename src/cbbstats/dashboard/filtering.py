"""Helpers for slicing the player roster the way the dashboard does."""

from __future__ import annotations

import re
from dataclasses import dataclass
from statistics import fmean
from typing import Iterable, Literal, Sequence

from cbbstats.analysis.grouping import classify_role
from cbbstats.config.positions import Position
from cbbstats.models import PlayerSeasonRecord


DEFAULT_HEIGHT_INCHES = 72

STARTER_MIN_PER = 25.0
BENCH_MIN_PER = 5.0

PlayerType = Literal["all", "starter", "bench", "limited"]
SortKey = Literal["name", "pts", "eFG", "bpm", "ORtg", "usg", "Min_per"]

_HEIGHT_PATTERNS = (
    re.compile(r"(\d+)['’](\d+)[\"”]?"),
    re.compile(r"(\d+)-(\d+)"),
    re.compile(r"(\d+)\s+(\d+)"),
    re.compile(r"(\d+)\.(\d+)"),
)
_FEET_ONLY = re.compile(r"(\d+)")


def parse_height(height: str | None) -> int:
    """Convert heights like 6'5", 6-5, "6 5" or 6.5 to inches."""

    if not height or height.strip().upper() == "N/A":
        return DEFAULT_HEIGHT_INCHES
    for pattern in _HEIGHT_PATTERNS:
        match = pattern.search(height)
        if match:
            return int(match.group(1)) * 12 + int(match.group(2))
    match = _FEET_ONLY.search(height)
    if match:
        return int(match.group(1)) * 12
    return DEFAULT_HEIGHT_INCHES


def format_height(inches: int) -> str:
    return f"{inches // 12}'{inches % 12}\""


def player_type(player: PlayerSeasonRecord) -> PlayerType:
    if player.Min_per >= STARTER_MIN_PER:
        return "starter"
    if player.Min_per >= BENCH_MIN_PER:
        return "bench"
    return "limited"


@dataclass(frozen=True)
class FilterCriteria:
    """Filtering configuration for the player dashboard."""

    search: str | None = None
    position: Position | None = None
    conference: str | None = None
    team: str | None = None
    class_year: str | None = None
    player_type: PlayerType = "all"
    min_ppg: float | None = None
    max_ppg: float | None = None
    min_efg: float | None = None
    max_efg: float | None = None
    min_bpm: float | None = None
    max_bpm: float | None = None
    min_height: int | None = None
    max_height: int | None = None
    sort_by: SortKey = "name"
    sort_direction: Literal["asc", "desc"] = "asc"
    limit: int | None = None


@dataclass(frozen=True)
class FilterSummary:
    """Aggregate stats for a filtered player selection."""

    available_players: int
    selected_players: int
    ppg_mean: float | None
    efg_mean: float | None
    bpm_mean: float | None


@dataclass(frozen=True)
class FilterResult:
    players: list[PlayerSeasonRecord]
    summary: FilterSummary


@dataclass(frozen=True)
class FilterOptions:
    conferences: list[str]
    teams: list[str]
    class_years: list[str]


def _in_range(value: float, low: float | None, high: float | None) -> bool:
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _passes_criteria(player: PlayerSeasonRecord, criteria: FilterCriteria) -> bool:
    if criteria.search:
        haystack = f"{player.player_name} {player.team} {player.conf}".lower()
        if criteria.search.lower() not in haystack:
            return False
    if criteria.position is not None and classify_role(player.role) != criteria.position:
        return False
    if criteria.conference is not None and player.conf != criteria.conference:
        return False
    if criteria.team is not None and player.team != criteria.team:
        return False
    if criteria.class_year is not None and player.yr != criteria.class_year:
        return False
    if criteria.player_type != "all" and player_type(player) != criteria.player_type:
        return False

    if not _in_range(player.pts, criteria.min_ppg, criteria.max_ppg):
        return False
    if not _in_range(player.eFG, criteria.min_efg, criteria.max_efg):
        return False
    if not _in_range(player.bpm, criteria.min_bpm, criteria.max_bpm):
        return False
    if criteria.min_height is not None or criteria.max_height is not None:
        if not _in_range(parse_height(player.ht), criteria.min_height, criteria.max_height):
            return False

    return True


def _build_summary(
    *,
    available: Sequence[PlayerSeasonRecord],
    selected: Sequence[PlayerSeasonRecord],
) -> FilterSummary:
    def _safe_mean(values: Iterable[float]) -> float | None:
        values = list(values)
        return fmean(values) if values else None

    return FilterSummary(
        available_players=len(available),
        selected_players=len(selected),
        ppg_mean=_safe_mean(player.pts for player in selected),
        efg_mean=_safe_mean(player.eFG for player in selected),
        bpm_mean=_safe_mean(player.bpm for player in selected),
    )


def filter_players(
    players: Sequence[PlayerSeasonRecord],
    criteria: FilterCriteria,
) -> FilterResult:
    """Filter the roster and return ordered selections with summary statistics."""

    player_list = list(players)
    filtered = [player for player in player_list if _passes_criteria(player, criteria)]

    reverse = criteria.sort_direction == "desc"
    if criteria.sort_by == "name":
        filtered.sort(key=lambda p: (p.player_name.lower(), p.year), reverse=reverse)
    else:
        sort_field = criteria.sort_by
        filtered.sort(key=lambda p: (p.stat(sort_field), p.player_name.lower()), reverse=reverse)

    selected = filtered
    if criteria.limit is not None and criteria.limit > 0:
        selected = filtered[: criteria.limit]

    return FilterResult(
        players=selected,
        summary=_build_summary(available=player_list, selected=filtered),
    )


def filter_options(players: Iterable[PlayerSeasonRecord]) -> FilterOptions:
    """Sorted unique values for the dashboard dropdowns."""

    player_list = list(players)
    return FilterOptions(
        conferences=sorted({player.conf for player in player_list if player.conf}),
        teams=sorted({player.team for player in player_list if player.team}),
        class_years=sorted({player.yr for player in player_list if player.yr}),
    )


__all__ = [
    "FilterCriteria",
    "FilterOptions",
    "FilterResult",
    "FilterSummary",
    "filter_options",
    "filter_players",
    "format_height",
    "parse_height",
    "player_type",
]
