"""Persistence layer for storing team entries."""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Protocol
from uuid import uuid4

from fantasy_cricket.models import TeamEntry


logger = logging.getLogger(__name__)


class TeamRepository(Protocol):
    """Storage capability the contest operations depend on."""

    def create(self, team: TeamEntry) -> TeamEntry: ...

    def get(self, team_id: str) -> Optional[TeamEntry]: ...

    def list(self) -> List[TeamEntry]: ...

    def update(self, team: TeamEntry) -> TeamEntry: ...

    def list_sorted(self) -> List[TeamEntry]: ...


class InMemoryTeamStore:
    """Dict-backed store with the same contract as :class:`TeamStore`."""

    def __init__(self) -> None:
        self._teams: Dict[str, TeamEntry] = {}

    def create(self, team: TeamEntry) -> TeamEntry:
        stored = team.model_copy(update={"team_id": uuid4().hex})
        self._teams[stored.team_id] = stored
        return stored

    def get(self, team_id: str) -> Optional[TeamEntry]:
        return self._teams.get(team_id)

    def list(self) -> List[TeamEntry]:
        return list(self._teams.values())

    def update(self, team: TeamEntry) -> TeamEntry:
        if team.team_id not in self._teams:
            raise KeyError(f"Team {team.team_id} not found")
        self._teams[team.team_id] = team
        return team

    def list_sorted(self) -> List[TeamEntry]:
        # sorted() is stable, so ties keep insertion order.
        return sorted(self._teams.values(), key=lambda team: team.total_points, reverse=True)


class TeamStore:
    """Simple SQLite-backed store for team entries.

    ``db_path`` is used as given; environment overrides are resolved by
    :class:`fantasy_cricket.config.Settings`.
    """

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        if isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path: Path | str = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS teams (
                    seq INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT NOT NULL UNIQUE,
                    team_name TEXT NOT NULL,
                    players_json TEXT NOT NULL,
                    captain TEXT NOT NULL,
                    vice_captain TEXT NOT NULL,
                    total_points INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            conn.commit()

    def create(self, team: TeamEntry) -> TeamEntry:
        team_id = uuid4().hex
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO teams (
                    id, team_name, players_json, captain, vice_captain,
                    total_points, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    team_id,
                    team.team_name,
                    json.dumps(list(team.players)),
                    team.captain,
                    team.vice_captain,
                    team.total_points,
                    now,
                    now,
                ),
            )
            conn.commit()
        logger.debug("Inserted team %s (%s)", team_id, team.team_name)
        created = self.get(team_id)
        if created is None:  # pragma: no cover
            raise KeyError(f"Team {team_id} not found after insert")
        return created

    def get(self, team_id: str) -> Optional[TeamEntry]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM teams WHERE id = ?", (team_id,)).fetchone()
            if row is None:
                return None
            return self._row_to_team(row)

    def list(self) -> List[TeamEntry]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM teams ORDER BY seq").fetchall()
        return [self._row_to_team(row) for row in rows]

    def update(self, team: TeamEntry) -> TeamEntry:
        if not team.team_id:
            raise KeyError("Team has no id; create it before updating")
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            cursor = conn.execute(
                """
                UPDATE teams
                SET team_name = ?,
                    players_json = ?,
                    captain = ?,
                    vice_captain = ?,
                    total_points = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    team.team_name,
                    json.dumps(list(team.players)),
                    team.captain,
                    team.vice_captain,
                    team.total_points,
                    now,
                    team.team_id,
                ),
            )
            conn.commit()
            if cursor.rowcount == 0:
                raise KeyError(f"Team {team.team_id} not found")
        return team

    def list_sorted(self) -> List[TeamEntry]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM teams ORDER BY total_points DESC, seq ASC"
            ).fetchall()
        return [self._row_to_team(row) for row in rows]

    def _row_to_team(self, row: sqlite3.Row) -> TeamEntry:
        return TeamEntry(
            team_id=row["id"],
            team_name=row["team_name"],
            players=json.loads(row["players_json"]),
            captain=row["captain"],
            vice_captain=row["vice_captain"],
            total_points=row["total_points"],
        )
