"""Strength and weakness classification against position averages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional, Tuple

from cbbstats.analysis.averages import AllAverages
from cbbstats.analysis.formatting import fraction_pct, suffixed
from cbbstats.analysis.grouping import classify_role
from cbbstats.config.positions import Position
from cbbstats.models import PlayerSeasonRecord


SIGNIFICANT_FACTOR = 1.1
NEGLIGIBLE_FACTOR = 0.9

Polarity = Literal["strength", "weakness"]


@dataclass(frozen=True)
class MetricRule:
    """One compared metric: where its average lives and how to describe it."""

    domain: str
    field: str
    strength_label: str
    weakness_label: str
    formatter: Callable[[float], str]
    higher_is_better: bool = True


# Evaluation order is also output order: shooting, defensive, playmaking, offensive.
METRIC_RULES: Tuple[MetricRule, ...] = (
    MetricRule("shooting", "TP_per", "Strong 3-point shooter", "Below-average 3-point shooter", fraction_pct),
    MetricRule("shooting", "FT_per", "Strong free throw shooter", "Below-average free throw shooter", fraction_pct),
    MetricRule("defensive", "stl_per", "Excellent steal rate", "Below-average steal rate", suffixed("%")),
    MetricRule(
        "defensive",
        "drtg",
        "Strong defensive impact",
        "Below-average defensive impact",
        suffixed(" DRtg"),
        higher_is_better=False,
    ),
    MetricRule("playmaking", "AST_per", "Excellent playmaker", "Below-average playmaking", suffixed("% AST")),
    MetricRule(
        "playmaking",
        "TO_per",
        "Great ball security",
        "High turnover rate",
        suffixed("% TO"),
        higher_is_better=False,
    ),
    MetricRule(
        "offensive",
        "ORtg",
        "Strong offensive efficiency",
        "Below-average offensive efficiency",
        suffixed(" ORtg"),
    ),
    MetricRule("offensive", "usg", "High offensive involvement", "Limited offensive role", suffixed("% USG")),
)


@dataclass(frozen=True)
class ComparisonFinding:
    label: str
    observed_value: str
    reference_value: str
    polarity: Polarity
    metric: str


@dataclass(frozen=True)
class ComparisonResult:
    position: Optional[Position]
    strengths: List[ComparisonFinding] = field(default_factory=list)
    weaknesses: List[ComparisonFinding] = field(default_factory=list)


def is_strength(value: float, average: float, *, higher_is_better: bool = True) -> bool:
    if higher_is_better:
        return value > average * SIGNIFICANT_FACTOR
    return value < average * NEGLIGIBLE_FACTOR


def is_weakness(value: float, average: float, *, higher_is_better: bool = True) -> bool:
    # A zero stat is treated as missing data, never as a weakness. Strengths
    # carry no such guard.
    if value == 0:
        return False
    if higher_is_better:
        return value < average * NEGLIGIBLE_FACTOR
    return value > average * SIGNIFICANT_FACTOR


def evaluate_metric(
    rule: MetricRule,
    value: float,
    average: float,
) -> Optional[ComparisonFinding]:
    """Return the single finding a metric produces, if any."""

    reference = f"Position Avg: {rule.formatter(average)}"
    if is_strength(value, average, higher_is_better=rule.higher_is_better):
        return ComparisonFinding(
            label=rule.strength_label,
            observed_value=rule.formatter(value),
            reference_value=reference,
            polarity="strength",
            metric=rule.field,
        )
    if is_weakness(value, average, higher_is_better=rule.higher_is_better):
        return ComparisonFinding(
            label=rule.weakness_label,
            observed_value=rule.formatter(value),
            reference_value=reference,
            polarity="weakness",
            metric=rule.field,
        )
    return None


def classify_player(
    player: PlayerSeasonRecord,
    averages: AllAverages,
    *,
    rules: Tuple[MetricRule, ...] = METRIC_RULES,
) -> ComparisonResult:
    """Compare a player to their position averages metric by metric.

    Players whose role does not resolve to G/F/C get an empty result; they are
    never compared against a fallback position.
    """

    position = classify_role(player.role)
    if position is None:
        return ComparisonResult(position=None)

    strengths: List[ComparisonFinding] = []
    weaknesses: List[ComparisonFinding] = []
    for rule in rules:
        average = averages.for_domain(rule.domain)[position][rule.field]
        finding = evaluate_metric(rule, player.stat(rule.field), average)
        if finding is None:
            continue
        if finding.polarity == "strength":
            strengths.append(finding)
        else:
            weaknesses.append(finding)

    return ComparisonResult(position=position, strengths=strengths, weaknesses=weaknesses)
