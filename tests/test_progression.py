import pytest

from cbbstats.analysis import Trend, build_progression, progression_table, trend
from cbbstats.analysis.progression import metrics_for_position, season_label
from cbbstats.config import Position
from cbbstats.models import PlayerSeasonRecord


def _season(year: int, role: str = "Combo G", **stats) -> PlayerSeasonRecord:
    return PlayerSeasonRecord(pid=year, player_name="Same Player", year=year, role=role, **stats)


def test_trend_significance_threshold():
    assert trend(10.3, 10) is Trend.IMPROVEMENT
    assert trend(10.15, 10) is Trend.NEUTRAL
    assert trend(9.7, 10) is Trend.DECLINE


def test_trend_respects_lower_is_better():
    assert trend(9.0, 10.0, higher_is_better=False) is Trend.IMPROVEMENT
    assert trend(11.0, 10.0, higher_is_better=False) is Trend.DECLINE


def test_trend_without_previous_or_zero_previous_is_neutral():
    assert trend(5.0, None) is Trend.NEUTRAL
    assert trend(5.0, 0) is Trend.NEUTRAL
    assert trend(0.0, 0.0) is Trend.NEUTRAL


def test_trend_with_negative_previous_is_neutral():
    # The relative change is divided by the signed previous value.
    assert trend(4.0, -2.0) is Trend.NEUTRAL
    assert trend(-6.0, -2.0) is Trend.NEUTRAL


def test_build_progression_orders_by_year():
    seasons = [_season(2023), _season(2021), _season(2022)]
    assert [s.year for s in build_progression(seasons)] == [2021, 2022, 2023]


def test_build_progression_is_stable_for_ties():
    first = _season(2022, team="A")
    second = _season(2022, team="B")
    assert [s.team for s in build_progression([first, second])] == ["A", "B"]


def test_season_label():
    assert season_label(2024) == "2023-24"
    assert season_label(2000) == "1999-00"


@pytest.mark.parametrize(
    "position,expected",
    [
        (Position.GUARD, ["min", "ppg", "ts", "3p", "ft", "ast", "to", "astTov", "stl", "bpm", "usg"]),
        (Position.FORWARD, ["min", "ppg", "efg", "3p", "2p", "orb", "drb", "stl", "blk", "bpm", "usg"]),
        (Position.CENTER, ["min", "ppg", "efg", "2p", "ft", "ftr", "orb", "drb", "blk", "bpm", "usg"]),
        (None, ["min", "ppg", "efg", "3p", "ft", "ast", "to", "bpm", "usg"]),
    ],
)
def test_metric_sets_by_position(position, expected):
    assert [metric.key for metric in metrics_for_position(position)] == expected


def test_progression_table_uses_most_recent_role():
    table = progression_table([_season(2024, role="C"), _season(2023, role="Stretch 4")])

    assert table.has_history
    assert table.position is Position.CENTER
    assert [row.label for row in table.rows] == ["2022-23", "2023-24"]
    assert "ftr" in [metric.key for metric in table.metrics]


def test_progression_table_trends_per_cell():
    older = _season(2023, GP=30, pts=300.0, TP_per=0.30, TO_per=20.0, Min_per=50.0)
    newer = _season(2024, GP=30, pts=450.0, TP_per=0.36, TO_per=15.0, Min_per=50.5)

    table = progression_table([newer, older])
    first, second = table.rows

    assert all(cell.trend is Trend.NEUTRAL for cell in first.cells)
    cells = {cell.key: cell for cell in second.cells}
    assert cells["ppg"].trend is Trend.IMPROVEMENT
    assert cells["3p"].trend is Trend.IMPROVEMENT
    assert cells["3p"].display == "36.0%"
    assert cells["to"].trend is Trend.IMPROVEMENT
    assert cells["min"].trend is Trend.NEUTRAL
    assert cells["ts"].trend is Trend.NEUTRAL


def test_points_trend_uses_per_game_rate():
    # Same total points over fewer games is an improvement in scoring rate.
    older = _season(2023, GP=30, pts=300.0)
    newer = _season(2024, GP=20, pts=300.0)

    cells = {cell.key: cell for cell in progression_table([older, newer]).rows[1].cells}
    assert cells["ppg"].trend is Trend.IMPROVEMENT
    assert cells["ppg"].display == "300.0"


def test_unmapped_role_falls_back_to_generic_metrics():
    table = progression_table([_season(2024, role="")])
    assert table.position is None
    assert [metric.key for metric in table.metrics] == [m.key for m in metrics_for_position(None)]


def test_empty_history_has_no_rows():
    table = progression_table([])
    assert not table.has_history
    assert table.rows == []
