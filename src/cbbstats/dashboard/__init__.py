"""Dashboard roster utilities (filtering, dropdown options)."""

from .filtering import (
    FilterCriteria,
    FilterOptions,
    FilterResult,
    FilterSummary,
    filter_options,
    filter_players,
    parse_height,
)

__all__ = [
    "FilterCriteria",
    "FilterOptions",
    "FilterResult",
    "FilterSummary",
    "filter_options",
    "filter_players",
    "parse_height",
]
