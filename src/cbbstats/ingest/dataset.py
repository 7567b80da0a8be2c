"""Load player season datasets and serve in-memory roster snapshots."""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from cbbstats.models import PlayerSeasonRecord


logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 30.0

_NUMERIC_FIELDS = frozenset(
    name
    for name, info in PlayerSeasonRecord.model_fields.items()
    if info.annotation in (int, float)
)
_MISSING_TOKENS = {"", "na", "n/a", "nan", "null", "none", "-"}


@dataclass
class LoadReport:
    total_rows: int = 0
    loaded_rows: int = 0
    skipped_rows: List[str] = field(default_factory=list)


def _clean_row(row: Mapping[str, Any]) -> dict[str, Any]:
    cleaned: dict[str, Any] = {}
    for key, value in row.items():
        if key is None:
            continue
        name = key.strip()
        if isinstance(value, str):
            value = value.strip()
            if name in _NUMERIC_FIELDS and value.lower() in _MISSING_TOKENS:
                continue
            if name in ("pid", "year", "GP") and value:
                try:
                    value = int(float(value))
                except ValueError:
                    pass  # rejected by model validation below
        elif value is None:
            continue
        cleaned[name] = value
    return cleaned


def rows_to_records(rows: Iterable[Mapping[str, Any]]) -> Tuple[List[PlayerSeasonRecord], LoadReport]:
    """Validate raw rows; rows that fail validation are skipped and reported."""

    records: List[PlayerSeasonRecord] = []
    report = LoadReport()
    for index, row in enumerate(rows):
        report.total_rows += 1
        try:
            records.append(PlayerSeasonRecord.model_validate(_clean_row(row)))
        except ValidationError as exc:
            label = f"row {index}: {row.get('player_name') or '<unnamed>'}"
            logger.warning("Skipping invalid player row %s (%d errors)", label, exc.error_count())
            report.skipped_rows.append(label)
    report.loaded_rows = len(records)
    return records, report


def _rows_from_json(payload: Any) -> Sequence[Mapping[str, Any]]:
    if isinstance(payload, dict):
        payload = payload.get("players", [])
    if not isinstance(payload, list):
        raise ValueError("player dataset JSON must be a list of rows or an object with 'players'")
    return payload


def parse_roster_text(text: str, *, fmt: str) -> Tuple[List[PlayerSeasonRecord], LoadReport]:
    if fmt == "csv":
        return rows_to_records(csv.DictReader(StringIO(text)))
    if fmt == "json":
        return rows_to_records(_rows_from_json(json.loads(text)))
    raise ValueError(f"Unsupported dataset format {fmt!r}")


def load_roster_csv(path: Path) -> List[PlayerSeasonRecord]:
    with path.open(newline="", encoding="utf-8") as f:
        records, _ = rows_to_records(csv.DictReader(f))
    return records


def load_roster_json(path: Path) -> List[PlayerSeasonRecord]:
    records, _ = parse_roster_text(path.read_text(encoding="utf-8"), fmt="json")
    return records


def load_roster(path: Path) -> List[PlayerSeasonRecord]:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return load_roster_csv(path)
    if suffix == ".json":
        return load_roster_json(path)
    raise ValueError(f"Unsupported dataset file {path}; expected .csv or .json")


def _format_for_source(source: str, content_type: str | None = None) -> str:
    if content_type and "csv" in content_type:
        return "csv"
    return "csv" if source.lower().split("?", 1)[0].endswith(".csv") else "json"


class DatasetProvider:
    """Process-wide roster snapshot loaded lazily from a file or URL.

    Load failures are logged and produce an empty roster so analysis code never
    sees a partial or failed fetch. A failed load is not kept; the next call
    tries the source again.
    """

    def __init__(
        self,
        source: str | Path | None = None,
        *,
        records: Sequence[PlayerSeasonRecord] | None = None,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
    ):
        self.source = str(source) if source is not None else None
        self._client = client
        self._timeout = timeout
        self._snapshot: Optional[List[PlayerSeasonRecord]] = list(records) if records is not None else None

    def _is_remote(self) -> bool:
        return bool(self.source) and self.source.startswith(("http://", "https://"))

    def _fetch_remote(self) -> List[PlayerSeasonRecord]:
        assert self.source is not None
        if self._client is not None:
            response = self._client.get(self.source, timeout=self._timeout)
        else:
            response = httpx.get(self.source, timeout=self._timeout)
        response.raise_for_status()
        fmt = _format_for_source(self.source, response.headers.get("content-type"))
        records, report = parse_roster_text(response.text, fmt=fmt)
        logger.info(
            "Loaded %s/%s player rows from %s", report.loaded_rows, report.total_rows, self.source
        )
        return records

    def _load(self) -> Optional[List[PlayerSeasonRecord]]:
        if not self.source:
            logger.warning("No player dataset configured; serving an empty roster")
            return []
        try:
            if self._is_remote():
                return self._fetch_remote()
            return load_roster(Path(self.source))
        except (OSError, ValueError, httpx.HTTPError) as exc:
            logger.warning("Unable to load player dataset from %s: %s", self.source, exc)
            return None

    def fetch_roster(self, year: int | None = None) -> List[PlayerSeasonRecord]:
        if self._snapshot is None:
            self._snapshot = self._load()
        if self._snapshot is None:
            return []
        if year is None:
            return list(self._snapshot)
        return [record for record in self._snapshot if record.year == year]

    def refresh(self) -> None:
        self._snapshot = None

    def player_history(self, player_name: str, start_year: int = 2022) -> List[PlayerSeasonRecord]:
        """All seasons for a player name from ``start_year`` on, in source order."""

        target = player_name.strip().casefold()
        return [
            record
            for record in self.fetch_roster()
            if record.player_name.strip().casefold() == target and record.year >= start_year
        ]

    def find_player(self, pid: int, year: int | None = None) -> Optional[PlayerSeasonRecord]:
        """Look a season up by ``(pid, year)``; the latest season when year is omitted."""

        matches = [record for record in self.fetch_roster() if record.pid == pid]
        if year is not None:
            matches = [record for record in matches if record.year == year]
        if not matches:
            return None
        return max(matches, key=lambda record: record.year)

    def latest_year(self) -> Optional[int]:
        roster = self.fetch_roster()
        if not roster:
            return None
        return max(record.year for record in roster)
