"""Command-line interface for positional averages, player analysis and progression."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from cbbstats.analysis import classify_player, compute_all_averages, progression_table
from cbbstats.config.settings import DEFAULT_PROGRESSION_START_YEAR
from cbbstats.ingest import DatasetProvider


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="College basketball positional stats")
    parser.add_argument("dataset", type=Path, help="Path to the player season dataset (.csv or .json)")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON output here instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Log skipped rows and lookups")
    subparsers = parser.add_subparsers(dest="command", required=True)

    averages = subparsers.add_parser("averages", help="Position averages for all four domains")
    averages.add_argument("--year", type=int, default=None, help="Season (defaults to the latest)")

    analyze = subparsers.add_parser("analyze", help="Strengths and weaknesses for one player")
    analyze.add_argument("pid", type=int, help="Player id")
    analyze.add_argument("--year", type=int, default=None, help="Season (defaults to the player's latest)")

    progression = subparsers.add_parser("progression", help="Season-over-season trends for one player")
    progression.add_argument("name", help="Player name")
    progression.add_argument(
        "--start-year",
        type=int,
        default=DEFAULT_PROGRESSION_START_YEAR,
        help="First season to include",
    )
    return parser.parse_args(argv)


def _averages(provider: DatasetProvider, args: argparse.Namespace) -> dict[str, Any]:
    year = args.year if args.year is not None else provider.latest_year()
    roster = provider.fetch_roster(year) if year is not None else []
    return {"year": year, **compute_all_averages(roster).as_dict()}


def _analyze(provider: DatasetProvider, args: argparse.Namespace) -> dict[str, Any]:
    player = provider.find_player(args.pid, args.year)
    if player is None:
        raise SystemExit(f"player {args.pid} not found")
    result = classify_player(player, compute_all_averages(provider.fetch_roster(player.year)))
    return {
        "player": player.player_name,
        "year": player.year,
        "role": player.role,
        "position": result.position.value if result.position else None,
        "strengths": [
            {"label": f.label, "value": f.observed_value, "reference": f.reference_value}
            for f in result.strengths
        ],
        "weaknesses": [
            {"label": f.label, "value": f.observed_value, "reference": f.reference_value}
            for f in result.weaknesses
        ],
    }


def _progression(provider: DatasetProvider, args: argparse.Namespace) -> dict[str, Any]:
    table = progression_table(provider.player_history(args.name, args.start_year))
    if not table.has_history:
        return {"player": args.name, "seasons": [], "message": "No historical data available"}
    return {
        "player": args.name,
        "position": table.position.value if table.position else None,
        "seasons": [
            {
                "season": row.label,
                "team": row.season.team,
                "gp": row.season.GP,
                "stats": {cell.label: {"value": cell.display, "trend": cell.trend.value} for cell in row.cells},
            }
            for row in table.rows
        ],
    }


_COMMANDS = {
    "averages": _averages,
    "analyze": _analyze,
    "progression": _progression,
}


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    if not args.dataset.exists():
        raise SystemExit(f"dataset {args.dataset} does not exist")
    provider = DatasetProvider(args.dataset)

    payload = _COMMANDS[args.command](provider, args)
    text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote {args.command} output to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()
