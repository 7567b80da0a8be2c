import pytest

from cbbstats.config import Position
from cbbstats.dashboard import FilterCriteria, filter_options, filter_players, parse_height
from cbbstats.dashboard.filtering import format_height, player_type
from cbbstats.models import PlayerSeasonRecord


def _sample_pool() -> list[PlayerSeasonRecord]:
    return [
        PlayerSeasonRecord(pid=1, player_name="Zed Guard", year=2024, team="Duke", conf="ACC", role="Pure PG",
                           yr="Jr", ht="6-2", Min_per=80.0, pts=18.0, eFG=54.0, bpm=6.0),
        PlayerSeasonRecord(pid=2, player_name="Abe Wing", year=2024, team="UNC", conf="ACC", role="Wing F",
                           yr="So", ht="6'8\"", Min_per=12.0, pts=5.5, eFG=47.0, bpm=-1.0),
        PlayerSeasonRecord(pid=3, player_name="Cal Center", year=2024, team="Kansas", conf="B12", role="C",
                           yr="Sr", ht="7 0", Min_per=3.0, pts=1.0, eFG=61.0, bpm=-4.0),
        PlayerSeasonRecord(pid=4, player_name="Moe Mystery", year=2024, team="Duke", conf="ACC", role="",
                           yr="Fr", ht="", Min_per=25.0, pts=9.0, eFG=50.0, bpm=0.5),
    ]


@pytest.mark.parametrize(
    "height,inches",
    [("6-2", 74), ("6'8\"", 80), ("6'8", 80), ("7 0", 84), ("6.5", 77), ("7", 84), ("", 72), ("N/A", 72), ("tall", 72)],
)
def test_parse_height(height, inches):
    assert parse_height(height) == inches


def test_format_height():
    assert format_height(74) == "6'2\""


def test_player_type_buckets():
    pool = _sample_pool()
    assert [player_type(p) for p in pool] == ["starter", "bench", "limited", "starter"]


def test_default_criteria_sorts_by_name():
    result = filter_players(_sample_pool(), FilterCriteria())
    assert [p.player_name for p in result.players] == ["Abe Wing", "Cal Center", "Moe Mystery", "Zed Guard"]
    assert result.summary.available_players == 4
    assert result.summary.selected_players == 4


def test_search_matches_name_team_and_conference():
    pool = _sample_pool()
    assert [p.pid for p in filter_players(pool, FilterCriteria(search="duke")).players] == [4, 1]
    assert [p.pid for p in filter_players(pool, FilterCriteria(search="b12")).players] == [3]
    assert filter_players(pool, FilterCriteria(search="nobody")).players == []


def test_position_filter_excludes_unmapped_roles():
    result = filter_players(_sample_pool(), FilterCriteria(position=Position.GUARD))
    assert [p.pid for p in result.players] == [1]


def test_range_filters_and_player_type():
    pool = _sample_pool()
    criteria = FilterCriteria(conference="ACC", min_ppg=5.0, max_bpm=1.0, player_type="bench")
    assert [p.pid for p in filter_players(pool, criteria).players] == [2]

    tall = filter_players(pool, FilterCriteria(min_height=80))
    assert sorted(p.pid for p in tall.players) == [2, 3]


def test_sort_by_stat_with_limit_and_summary():
    result = filter_players(_sample_pool(), FilterCriteria(sort_by="pts", sort_direction="desc", limit=2))

    assert [p.pid for p in result.players] == [1, 4]
    assert result.summary.selected_players == 4
    assert result.summary.ppg_mean == pytest.approx((18.0 + 5.5 + 1.0 + 9.0) / 4)


def test_empty_selection_summary_is_none():
    result = filter_players(_sample_pool(), FilterCriteria(team="Gonzaga"))
    assert result.summary.selected_players == 0
    assert result.summary.ppg_mean is None


def test_filter_options_sorted_unique():
    options = filter_options(_sample_pool())
    assert options.conferences == ["ACC", "B12"]
    assert options.teams == ["Duke", "Kansas", "UNC"]
    assert options.class_years == ["Fr", "Jr", "So", "Sr"]
