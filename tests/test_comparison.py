import pytest

from cbbstats.analysis import classify_player, compute_all_averages
from cbbstats.analysis.averages import AllAverages
from cbbstats.analysis.comparison import METRIC_RULES, is_strength, is_weakness
from cbbstats.config import DEFENSIVE, OFFENSIVE, PLAYMAKING, SHOOTING, POSITIONS
from cbbstats.models import PlayerSeasonRecord


def _uniform_averages(value: float) -> AllAverages:
    def table(schema):
        return {position: {field: value for field in schema.fields} for position in POSITIONS}

    return AllAverages(
        shooting=table(SHOOTING),
        defensive=table(DEFENSIVE),
        playmaking=table(PLAYMAKING),
        offensive=table(OFFENSIVE),
    )


def _guard(pid: int, **stats) -> PlayerSeasonRecord:
    return PlayerSeasonRecord(pid=pid, player_name=f"Guard {pid}", year=2024, role="Combo G", **stats)


def test_higher_is_better_thresholds_are_exclusive():
    assert is_strength(55.0001, 50)
    assert not is_strength(55, 50)
    assert is_weakness(44.9999, 50)
    assert not is_weakness(45, 50)
    assert not is_weakness(0, 50)


def test_lower_is_better_thresholds():
    assert is_strength(44.9999, 50, higher_is_better=False)
    assert not is_strength(45, 50, higher_is_better=False)
    assert is_weakness(55.0001, 50, higher_is_better=False)
    assert not is_weakness(0, 50, higher_is_better=False)


def test_zero_value_can_still_be_a_strength_for_lower_is_better():
    # Weakness checks ignore zero as missing data; strength checks do not.
    assert is_strength(0, 50, higher_is_better=False)


def test_end_to_end_three_point_classification():
    roster = [_guard(1, TP_per=0.40), _guard(2, TP_per=0.30)]
    averages = compute_all_averages(roster)
    assert averages.shooting[POSITIONS[0]]["TP_per"] == pytest.approx(0.35)

    shooter = classify_player(_guard(3, TP_per=0.40), averages)
    assert [f.metric for f in shooter.strengths if f.metric == "TP_per"] == ["TP_per"]
    finding = next(f for f in shooter.strengths if f.metric == "TP_per")
    assert finding.label == "Strong 3-point shooter"
    assert finding.observed_value == "40.0%"
    assert finding.reference_value == "Position Avg: 35.0%"
    assert finding.polarity == "strength"

    bricklayer = classify_player(_guard(4, TP_per=0.30), averages)
    weakness = next(f for f in bricklayer.weaknesses if f.metric == "TP_per")
    assert weakness.label == "Below-average 3-point shooter"
    assert weakness.observed_value == "30.0%"


def test_findings_follow_fixed_metric_order():
    averages = _uniform_averages(50.0)
    player = _guard(
        7,
        TP_per=60.0,
        FT_per=60.0,
        stl_per=60.0,
        drtg=40.0,
        AST_per=60.0,
        TO_per=40.0,
        ORtg=60.0,
        usg=60.0,
    )

    result = classify_player(player, averages)

    assert [f.metric for f in result.strengths] == [rule.field for rule in METRIC_RULES]
    assert result.weaknesses == []


def test_each_metric_yields_at_most_one_finding():
    averages = _uniform_averages(50.0)
    player = _guard(8, TP_per=30.0, FT_per=50.0, drtg=70.0, TO_per=70.0, ORtg=52.0, usg=0.0)

    result = classify_player(player, averages)
    metrics = [f.metric for f in result.strengths + result.weaknesses]

    assert len(metrics) == len(set(metrics))
    assert [f.metric for f in result.weaknesses] == ["TP_per", "drtg", "TO_per"]
    labels = {f.metric: f.label for f in result.weaknesses}
    assert labels["drtg"] == "Below-average defensive impact"
    assert labels["TO_per"] == "High turnover rate"
    # stl_per, AST_per and usg are zero: missing data, not weaknesses. Zero on
    # lower-is-better metrics is not present here, so no strengths at all.
    assert result.strengths == []


def test_formatting_of_rate_metrics():
    averages = _uniform_averages(100.0)
    result = classify_player(_guard(9, drtg=85.0, ORtg=125.5, usg=30.0), averages)

    by_metric = {f.metric: f for f in result.strengths}
    assert by_metric["drtg"].observed_value == "85.0 DRtg"
    assert by_metric["drtg"].reference_value == "Position Avg: 100.0 DRtg"
    assert by_metric["ORtg"].observed_value == "125.5 ORtg"
    assert "usg" not in by_metric
    weak = {f.metric: f for f in result.weaknesses}
    assert weak["usg"].observed_value == "30.0% USG"
    assert weak["usg"].label == "Limited offensive role"


def test_unmapped_role_produces_no_findings():
    player = PlayerSeasonRecord(pid=10, player_name="Walk On", year=2024, role="", TP_per=0.9)

    result = classify_player(player, _uniform_averages(0.1))

    assert result.position is None
    assert result.strengths == []
    assert result.weaknesses == []
