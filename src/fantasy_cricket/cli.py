"""Command-line interface for scoring teams and running the contest offline."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from fantasy_cricket.config import Settings
from fantasy_cricket.contest import leaderboard, process_results
from fantasy_cricket.ingest import load_match_data
from fantasy_cricket.models import TeamEntry
from fantasy_cricket.persistence import TeamStore
from fantasy_cricket.scoring import score_breakdown


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Fantasy cricket contest tools")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (e.g., DEBUG, INFO, WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    score = subparsers.add_parser("score", help="Score a team JSON file against the match feed")
    score.add_argument("team", type=Path, help="Path to a team entry JSON file")
    score.add_argument("--data-dir", type=Path, default=settings.data_dir, help="Directory holding match.json/match.csv")

    process = subparsers.add_parser("process", help="Rescore every stored team")
    process.add_argument("--db", default=settings.db_path, help="SQLite database path")
    process.add_argument("--data-dir", type=Path, default=settings.data_dir, help="Directory holding match.json/match.csv")

    board = subparsers.add_parser("leaderboard", help="Print the winning team(s)")
    board.add_argument("--db", default=settings.db_path, help="SQLite database path")

    return parser.parse_args(argv)


def _score(args: argparse.Namespace) -> None:
    team = TeamEntry.model_validate_json(args.team.read_text(encoding="utf-8"))
    match_data = load_match_data(args.data_dir)
    breakdown = score_breakdown(team, match_data)
    payload = {
        "teamName": team.team_name,
        "batting": breakdown.batting,
        "bowling": breakdown.bowling,
        "fielding": breakdown.fielding,
        "creditedBalls": breakdown.credited_balls,
        "totalPoints": breakdown.total,
    }
    print(json.dumps(payload, indent=2))


def _process(args: argparse.Namespace) -> None:
    store = TeamStore(args.db)
    summary = process_results(store, load_match_data(args.data_dir))
    print(f"Processed {summary.teams_processed} teams against {summary.balls} balls")


def _leaderboard(args: argparse.Namespace) -> None:
    store = TeamStore(args.db)
    winners = leaderboard(store)
    if not winners:
        print("No teams submitted yet")
        return
    print(json.dumps([team.model_dump(by_alias=True) for team in winners], indent=2))


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    handlers = {
        "score": _score,
        "process": _process,
        "leaderboard": _leaderboard,
    }
    handlers[args.command](args)


if __name__ == "__main__":
    main()
