"""Input adapters for the static match feed and player pool."""

from .match_data import (
    FeedError,
    load_match_data,
    load_players,
    parse_events,
    read_csv_file,
    read_json_file,
)

__all__ = [
    "FeedError",
    "load_match_data",
    "load_players",
    "parse_events",
    "read_csv_file",
    "read_json_file",
]
