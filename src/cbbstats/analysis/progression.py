"""Season-over-season progression tables with trend detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from cbbstats.analysis.formatting import fraction_pct, pct, plain
from cbbstats.analysis.grouping import classify_role
from cbbstats.config.positions import Position
from cbbstats.models import PlayerSeasonRecord


SIGNIFICANCE_THRESHOLD = 0.02


class Trend(str, Enum):
    IMPROVEMENT = "improvement"
    DECLINE = "decline"
    NEUTRAL = "neutral"


def trend(current: float, previous: Optional[float], higher_is_better: bool = True) -> Trend:
    """Classify the change from ``previous`` to ``current``.

    The first season (no previous value) and a previous value of exactly zero
    are always neutral, as is any relative change under 2%.
    """

    if previous is None or previous == 0:
        return Trend.NEUTRAL
    if abs(current - previous) / previous < SIGNIFICANCE_THRESHOLD:
        return Trend.NEUTRAL
    improved = current > previous if higher_is_better else current < previous
    return Trend.IMPROVEMENT if improved else Trend.DECLINE


def build_progression(seasons: Iterable[PlayerSeasonRecord]) -> List[PlayerSeasonRecord]:
    """Order seasons oldest first; ties keep their input order."""

    return sorted(seasons, key=lambda season: season.year)


def _points_per_game(season: PlayerSeasonRecord) -> float:
    if season.GP == 0:
        return 0.0
    return season.pts / season.GP


def _field(name: str) -> Callable[[PlayerSeasonRecord], float]:
    def getter(season: PlayerSeasonRecord) -> float:
        return season.stat(name)

    return getter


@dataclass(frozen=True)
class ProgressionMetric:
    key: str
    label: str
    value: Callable[[PlayerSeasonRecord], float]
    display: Callable[[PlayerSeasonRecord], str]
    higher_is_better: bool = True
    trend_value: Optional[Callable[[PlayerSeasonRecord], float]] = None

    def trend_of(self, season: PlayerSeasonRecord) -> float:
        getter = self.trend_value or self.value
        return getter(season)


def _metric(
    key: str,
    label: str,
    field_name: str,
    formatter: Callable[[float], str],
    *,
    higher_is_better: bool = True,
) -> ProgressionMetric:
    getter = _field(field_name)
    return ProgressionMetric(
        key=key,
        label=label,
        value=getter,
        display=lambda season: formatter(getter(season)),
        higher_is_better=higher_is_better,
    )


MIN_PER = _metric("min", "Min%", "Min_per", plain)
# PPG shows the stored points value but trends on points per game played.
PPG = ProgressionMetric(
    key="ppg",
    label="PPG",
    value=_field("pts"),
    display=lambda season: plain(season.pts),
    trend_value=_points_per_game,
)
TS = _metric("ts", "TS%", "TS_per", pct)
EFG = _metric("efg", "eFG%", "eFG", pct)
THREE = _metric("3p", "3P%", "TP_per", fraction_pct)
TWO = _metric("2p", "2P%", "twoP_per", fraction_pct)
FT = _metric("ft", "FT%", "FT_per", fraction_pct)
FTR = _metric("ftr", "FTr", "ftr", plain)
AST = _metric("ast", "AST%", "AST_per", pct)
TO = _metric("to", "TO%", "TO_per", pct, higher_is_better=False)
AST_TOV = _metric("astTov", "AST/TO", "astTov", plain)
STL = _metric("stl", "STL%", "stl_per", pct)
BLK = _metric("blk", "BLK%", "blk_per", pct)
ORB = _metric("orb", "ORB%", "ORB_per", pct)
DRB = _metric("drb", "DRB%", "DRB_per", pct)
BPM = _metric("bpm", "BPM", "bpm", plain)
USG = _metric("usg", "USG%", "usg", pct)

BASE_METRICS: Tuple[ProgressionMetric, ...] = (MIN_PER, PPG)
TAIL_METRICS: Tuple[ProgressionMetric, ...] = (BPM, USG)

POSITION_METRICS: Dict[Optional[Position], Tuple[ProgressionMetric, ...]] = {
    Position.GUARD: (TS, THREE, FT, AST, TO, AST_TOV, STL),
    Position.FORWARD: (EFG, THREE, TWO, ORB, DRB, STL, BLK),
    Position.CENTER: (EFG, TWO, FT, FTR, ORB, DRB, BLK),
    None: (EFG, THREE, FT, AST, TO),
}


def metrics_for_position(position: Optional[Position]) -> Tuple[ProgressionMetric, ...]:
    """Displayed metrics: base columns, the position's set, then BPM and USG."""

    return BASE_METRICS + POSITION_METRICS[position] + TAIL_METRICS


def season_label(year: int) -> str:
    """Academic-year label for a season-ending year, e.g. 2024 -> "2023-24"."""

    return f"{year - 1}-{str(year)[-2:]}"


@dataclass(frozen=True)
class ProgressionCell:
    key: str
    label: str
    value: float
    display: str
    trend: Trend


@dataclass(frozen=True)
class ProgressionRow:
    season: PlayerSeasonRecord
    label: str
    cells: List[ProgressionCell]


@dataclass(frozen=True)
class ProgressionTable:
    seasons: List[PlayerSeasonRecord]
    position: Optional[Position]
    metrics: Tuple[ProgressionMetric, ...]
    rows: List[ProgressionRow] = field(default_factory=list)

    @property
    def has_history(self) -> bool:
        return bool(self.seasons)


def _row(
    season: PlayerSeasonRecord,
    previous: Optional[PlayerSeasonRecord],
    metrics: Sequence[ProgressionMetric],
) -> ProgressionRow:
    cells = []
    for metric in metrics:
        prior = metric.trend_of(previous) if previous is not None else None
        cells.append(
            ProgressionCell(
                key=metric.key,
                label=metric.label,
                value=metric.value(season),
                display=metric.display(season),
                trend=trend(metric.trend_of(season), prior, metric.higher_is_better),
            )
        )
    return ProgressionRow(season=season, label=season_label(season.year), cells=cells)


def progression_table(seasons: Iterable[PlayerSeasonRecord]) -> ProgressionTable:
    """Build the ordered, position-aware progression for one player."""

    ordered = build_progression(seasons)
    if not ordered:
        return ProgressionTable(seasons=[], position=None, metrics=metrics_for_position(None))

    position = classify_role(ordered[-1].role)
    metrics = metrics_for_position(position)
    rows = [
        _row(season, ordered[index - 1] if index > 0 else None, metrics)
        for index, season in enumerate(ordered)
    ]
    return ProgressionTable(seasons=ordered, position=position, metrics=metrics, rows=rows)
