from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from fantasy_cricket.api import create_app
from fantasy_cricket.config import Settings
from fantasy_cricket.models import BallEvent
from fantasy_cricket.persistence import InMemoryTeamStore, TeamStore


PLAYERS = [f"Player {index}" for index in range(1, 12)]


def _team_payload(name: str = "Strikers", players: list[str] | None = None, **overrides) -> dict:
    roster = list(players) if players is not None else list(PLAYERS)
    payload = {
        "teamName": name,
        "players": roster,
        "captain": roster[0],
        "viceCaptain": roster[1],
    }
    payload.update(overrides)
    return payload


class _FeedStub:
    def __init__(self, events: list[BallEvent] | None = None):
        self.events = list(events or [])

    def __call__(self) -> list[BallEvent]:
        return self.events


@pytest.fixture
def feed():
    return _FeedStub()


@pytest.fixture
async def client(feed):
    app = create_app(
        InMemoryTeamStore(),
        match_source=feed,
        player_source=lambda: ["Player 1", "Player 2"],
        settings=Settings(),
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_add_team(client: AsyncClient):
    resp = await client.post("/add-team", json=_team_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Team entry added successfully"
    assert body["teamId"]

    stored = client.app.state.team_store.get(body["teamId"])
    assert stored.total_points == 0
    assert stored.vice_captain == "Player 2"


@pytest.mark.anyio
async def test_add_team_wrong_roster_size(client: AsyncClient):
    resp = await client.post("/add-team", json=_team_payload(players=PLAYERS[:10]))
    assert resp.status_code == 400
    assert resp.json() == {"error": "A team must have 11 players"}
    assert client.app.state.team_store.list() == []


@pytest.mark.anyio
async def test_add_team_unknown_captain(client: AsyncClient):
    resp = await client.post("/add-team", json=_team_payload(captain="Nobody"))
    assert resp.status_code == 400
    assert resp.json() == {"error": "Captain or vice-captain not found in players list"}


@pytest.mark.anyio
async def test_add_team_missing_fields_rejected(client: AsyncClient):
    resp = await client.post("/add-team", json={"teamName": "Strikers"})
    assert resp.status_code == 422


@pytest.mark.anyio
async def test_add_team_store_failure(client: AsyncClient):
    def broken_create(team):
        raise RuntimeError("database unavailable")

    client.app.state.team_store.create = broken_create
    resp = await client.post("/add-team", json=_team_payload())
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to add team entry"}


@pytest.mark.anyio
async def test_process_result_and_leaderboard(client: AsyncClient, feed: _FeedStub):
    others = [f"Other {index}" for index in range(11)]
    await client.post("/add-team", json=_team_payload("Batters"))
    await client.post("/add-team", json=_team_payload("Bowlers", players=others))
    feed.events = [
        BallEvent(batsman="Player 1", bowler="Nobody", runs_batter=6),
        BallEvent(batsman="Nobody", bowler="Other 3", wickets=1, dismissal="lbw"),
    ]

    resp = await client.post("/process-result")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Match result processed successfully", "teamsProcessed": 2}

    resp = await client.get("/team-result")
    assert resp.status_code == 200
    winners = resp.json()
    assert len(winners) == 1
    assert winners[0]["teamName"] == "Bowlers"
    assert winners[0]["totalPoints"] == 33
    assert winners[0]["viceCaptain"] == "Other 1"
    assert winners[0]["teamId"]


@pytest.mark.anyio
async def test_leaderboard_includes_ties(client: AsyncClient):
    store = client.app.state.team_store
    for name, points in [("A", 10), ("B", 30), ("C", 30), ("D", 5)]:
        resp = await client.post("/add-team", json=_team_payload(name))
        stored = store.get(resp.json()["teamId"])
        store.update(stored.model_copy(update={"total_points": points}))

    resp = await client.get("/team-result")
    assert resp.status_code == 200
    assert [team["teamName"] for team in resp.json()] == ["B", "C"]


@pytest.mark.anyio
async def test_empty_feed_round_trip(client: AsyncClient):
    await client.post("/add-team", json=_team_payload())

    resp = await client.post("/process-result")
    assert resp.status_code == 200

    resp = await client.get("/team-result")
    assert [team["totalPoints"] for team in resp.json()] == [0]


@pytest.mark.anyio
async def test_leaderboard_without_teams(client: AsyncClient):
    resp = await client.get("/team-result")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.anyio
async def test_process_result_feed_failure(client: AsyncClient, feed: _FeedStub):
    def broken_feed():
        raise ValueError("match.json is not valid JSON")

    app = create_app(
        client.app.state.team_store,
        match_source=broken_feed,
        settings=Settings(),
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as broken:
        resp = await broken.post("/process-result")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to process match result"}


@pytest.mark.anyio
async def test_players(client: AsyncClient):
    resp = await client.get("/players")
    assert resp.status_code == 200
    assert resp.json() == ["Player 1", "Player 2"]


@pytest.mark.anyio
async def test_default_wiring_uses_settings(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("FANTASY_CRICKET_DB_PATH", raising=False)
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "match.csv").write_text(
        "batsman,bowler,fielder,runs_batter,wickets,dismissal,maiden\n"
        "Player 1,X,,4,0,none,false\n",
        encoding="utf-8",
    )
    (data_dir / "players.json").write_text('["Player 1"]', encoding="utf-8")
    settings = Settings(db_path=tmp_path / "teams.sqlite", data_dir=data_dir)
    app = create_app(settings=settings)
    assert isinstance(app.state.team_store, TeamStore)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        resp = await client.post("/add-team", json=_team_payload())
        assert resp.status_code == 201
        resp = await client.post("/process-result")
        assert resp.status_code == 200
        resp = await client.get("/team-result")
        assert resp.json()[0]["totalPoints"] == 5
        resp = await client.get("/players")
        assert resp.json() == ["Player 1"]


def test_default_store_path_comes_from_env(tmp_path: Path, monkeypatch):
    env_path = tmp_path / "env.sqlite"
    monkeypatch.setenv("FANTASY_CRICKET_DB_PATH", str(env_path))
    monkeypatch.setenv("FANTASY_CRICKET_DATA_DIR", str(tmp_path))

    app = create_app()

    assert app.state.team_store.db_path == env_path
    assert env_path.exists()
