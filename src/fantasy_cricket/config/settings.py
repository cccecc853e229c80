"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DB_PATH_ENV = "FANTASY_CRICKET_DB_PATH"
DATA_DIR_ENV = "FANTASY_CRICKET_DATA_DIR"
LOG_LEVEL_ENV = "FANTASY_CRICKET_LOG_LEVEL"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


@dataclass(frozen=True)
class Settings:
    db_path: Path | str = Path("fantasy_cricket.sqlite")
    data_dir: Path = Path("data")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``FANTASY_CRICKET_*`` variables.

        A ``file:`` database path is kept as a string so it can be handed to
        sqlite as a URI.
        """

        raw_db = _get_env(DB_PATH_ENV, str(cls.db_path))
        db_path: Path | str = raw_db if raw_db.startswith("file:") else Path(raw_db)
        return cls(
            db_path=db_path,
            data_dir=Path(_get_env(DATA_DIR_ENV, str(cls.data_dir))),
            log_level=_get_env(LOG_LEVEL_ENV, cls.log_level).upper(),
        )
