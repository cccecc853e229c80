"""Helpers to load the JSON and CSV reference files and emit canonical records."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from fantasy_cricket.models import BallEvent


logger = logging.getLogger(__name__)

MATCH_JSON = "match.json"
MATCH_CSV = "match.csv"
PLAYERS_JSON = "players.json"
PLAYERS_CSV = "players.csv"


class FeedError(ValueError):
    """Raised when a reference data file exists but cannot be read."""


def read_json_file(path: Path) -> List[Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise FeedError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise FeedError(f"{path} must contain a JSON array, got {type(data).__name__}")
    return data


def read_csv_file(path: Path) -> List[dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        return [dict(row) for row in reader]


def _existing(data_dir: Path, name: str) -> Path | None:
    path = Path(data_dir) / name
    if not path.exists():
        logger.warning("Reference file %s not found; skipping", path)
        return None
    return path


def parse_events(rows: Iterable[Mapping[str, Any]]) -> List[BallEvent]:
    events: List[BallEvent] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise FeedError(f"match entry {index} is not an object: {row!r}")
        events.append(BallEvent.model_validate(dict(row)))
    return events


def load_match_data(
    data_dir: Path,
    *,
    json_name: str = MATCH_JSON,
    csv_name: str = MATCH_CSV,
) -> List[BallEvent]:
    """Return JSON events followed by CSV events, without deduplication."""

    rows: List[Any] = []
    json_path = _existing(data_dir, json_name)
    if json_path is not None:
        json_rows = read_json_file(json_path)
        logger.debug("Loaded %d match events from %s", len(json_rows), json_path)
        rows.extend(json_rows)
    csv_path = _existing(data_dir, csv_name)
    if csv_path is not None:
        csv_rows = read_csv_file(csv_path)
        logger.debug("Loaded %d match events from %s", len(csv_rows), csv_path)
        rows.extend(csv_rows)
    return parse_events(rows)


def _player_name(entry: Any) -> str:
    if isinstance(entry, Mapping):
        return str(entry.get("name", "")).strip()
    return str(entry).strip()


def load_players(
    data_dir: Path,
    *,
    json_name: str = PLAYERS_JSON,
    csv_name: str = PLAYERS_CSV,
) -> List[str]:
    """Return the player pool: JSON names followed by the CSV ``name`` column."""

    players: List[str] = []
    json_path = _existing(data_dir, json_name)
    if json_path is not None:
        players.extend(_player_name(entry) for entry in read_json_file(json_path))
    csv_path = _existing(data_dir, csv_name)
    if csv_path is not None:
        players.extend(_player_name(row.get("name", "")) for row in read_csv_file(csv_path))
    return players
