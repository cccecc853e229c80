"""REST API for the fantasy cricket contest."""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from fantasy_cricket.api.schemas import (
    ErrorResponse,
    ProcessResultResponse,
    TeamCreatedResponse,
    TeamEntryRequest,
    TeamEntryResponse,
)
from fantasy_cricket.config import Settings
from fantasy_cricket.contest import (
    TeamValidationError,
    leaderboard,
    process_results,
    submit_team,
)
from fantasy_cricket.ingest import load_match_data, load_players
from fantasy_cricket.models import BallEvent
from fantasy_cricket.persistence import TeamRepository, TeamStore


logger = logging.getLogger(__name__)

MatchSource = Callable[[], Sequence[BallEvent]]
PlayerSource = Callable[[], Sequence[str]]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(
    store: TeamRepository | None = None,
    *,
    match_source: MatchSource | None = None,
    player_source: PlayerSource | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the application around an injected team store and data sources.

    Anything not supplied falls back to :meth:`Settings.from_env`: a SQLite
    store at ``db_path`` and the JSON/CSV reference files under ``data_dir``.
    """

    settings = settings or Settings.from_env()
    if store is None:
        store = TeamStore(settings.db_path)
    if match_source is None:
        def match_source() -> Sequence[BallEvent]:
            return load_match_data(settings.data_dir)
    if player_source is None:
        def player_source() -> Sequence[str]:
            return load_players(settings.data_dir)

    app = FastAPI(title="fantasy cricket contest")
    app.state.team_store = store
    app.state.settings = settings

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/add-team", status_code=201, response_model=TeamCreatedResponse)
    async def add_team(payload: TeamEntryRequest):
        try:
            stored = submit_team(store, payload.to_entry())
        except TeamValidationError as exc:
            logger.info("Rejected team %r: %s", payload.team_name, exc)
            return _error(400, str(exc))
        except Exception:
            logger.exception("Failed to add team %r", payload.team_name)
            return _error(500, "Failed to add team entry")
        return TeamCreatedResponse(message="Team entry added successfully", team_id=stored.team_id)

    @app.post("/process-result", response_model=ProcessResultResponse)
    async def process_result():
        try:
            summary = process_results(store, list(match_source()))
        except Exception:
            logger.exception("Failed to process match result")
            return _error(500, "Failed to process match result")
        return ProcessResultResponse(
            message="Match result processed successfully",
            teams_processed=summary.teams_processed,
        )

    @app.get("/team-result", response_model=List[TeamEntryResponse])
    async def team_result():
        try:
            winners = leaderboard(store)
        except Exception:
            logger.exception("Failed to retrieve team results")
            return _error(500, "Failed to retrieve team results")
        return [TeamEntryResponse.from_entry(team) for team in winners]

    @app.get("/players", response_model=List[str])
    async def players():
        try:
            return list(player_source())
        except Exception:
            logger.exception("Failed to load players")
            return _error(500, "Failed to load players")

    return app
