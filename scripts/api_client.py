"""Lightweight REST client for the cbbstats API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the cbbstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:5000")
    parser.add_argument("--averages", action="store_true", help="Print position averages and exit")
    parser.add_argument("--year", type=int, default=None, help="Season for averages/analysis")
    parser.add_argument("--analyze", metavar="PID", type=int, help="Print strengths/weaknesses for a player")
    parser.add_argument("--progression", metavar="NAME", help="Print season progression for a player")
    parser.add_argument("--start-year", type=int, default=2022, help="First season for --progression")
    parser.add_argument("--image", metavar="NAME", help="Resolve a player's image URL")
    args = parser.parse_args()

    params = {"year": args.year} if args.year is not None else {}

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.get("/health")
        resp.raise_for_status()
        print("Health:", json.dumps(resp.json()))

        if args.averages:
            resp = client.get("/averages", params=params)
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
        if args.analyze is not None:
            resp = client.get(f"/players/{args.analyze}/analysis", params=params)
            if resp.status_code == 404:
                raise SystemExit(f"player {args.analyze} not found")
            resp.raise_for_status()
            payload = resp.json()
            for label, key in (("Strengths", "strengths"), ("Weaknesses", "weaknesses")):
                print(f"{label}:")
                for finding in payload[key]:
                    print(f"  {finding['label']}: {finding['observedValue']} ({finding['referenceValue']})")
        if args.progression:
            resp = client.get(
                f"/player-progression/{args.progression}",
                params={"startYear": args.start_year},
            )
            resp.raise_for_status()
            payload = resp.json()
            print(f"Received {payload['totalYears']} seasons")
            for row in payload["rows"]:
                stats = ", ".join(f"{cell['label']} {cell['display']} ({cell['trend']})" for cell in row["cells"])
                print(f"  {row['season']} {row['team']}: {stats}")
        if args.image:
            resp = client.get(f"/player-image/{args.image}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
