"""Input adapters that load player season datasets."""

from .dataset import (
    DatasetProvider,
    LoadReport,
    load_roster,
    load_roster_csv,
    load_roster_json,
    parse_roster_text,
    rows_to_records,
)

__all__ = [
    "DatasetProvider",
    "LoadReport",
    "load_roster",
    "load_roster_csv",
    "load_roster_json",
    "parse_roster_text",
    "rows_to_records",
]
