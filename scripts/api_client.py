"""Lightweight REST client for the fantasy cricket API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the fantasy cricket REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--add-team", type=Path, metavar="TEAM_JSON", help="Submit a team entry from a JSON file")
    parser.add_argument("--process", action="store_true", help="Rescore every team against the match feed")
    parser.add_argument("--results", action="store_true", help="Print the winning team(s)")
    args = parser.parse_args()

    if not (args.add_team or args.process or args.results):
        raise SystemExit("nothing to do: pass --add-team, --process and/or --results")

    with httpx.Client(base_url=args.base_url) as client:
        if args.add_team:
            try:
                team = json.loads(args.add_team.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise SystemExit(f"Invalid team JSON: {exc}") from exc
            resp = client.post("/add-team", json=team)
            if resp.status_code == 400:
                raise SystemExit(f"team rejected: {resp.json()['error']}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
        if args.process:
            resp = client.post("/process-result")
            resp.raise_for_status()
            print(resp.json()["message"])
        if args.results:
            resp = client.get("/team-result")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
