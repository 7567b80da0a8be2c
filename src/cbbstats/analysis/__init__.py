"""Positional aggregation, comparison and progression."""

from .averages import (
    AllAverages,
    DomainComparison,
    average_for,
    compare_all_domains,
    compare_to_position_average,
    compute_all_averages,
    position_averages,
)
from .comparison import ComparisonFinding, ComparisonResult, classify_player
from .grouping import classify_role, group_by_position
from .progression import Trend, build_progression, progression_table, trend

__all__ = [
    "AllAverages",
    "DomainComparison",
    "average_for",
    "compare_all_domains",
    "compare_to_position_average",
    "compute_all_averages",
    "position_averages",
    "ComparisonFinding",
    "ComparisonResult",
    "classify_player",
    "classify_role",
    "group_by_position",
    "Trend",
    "build_progression",
    "progression_table",
    "trend",
]
