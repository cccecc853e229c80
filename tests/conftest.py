import pytest

from fantasy_cricket.models import TeamEntry


PLAYERS = [f"Player {index}" for index in range(1, 12)]


def make_team(name: str = "Strikers", players: list[str] | None = None, **overrides) -> TeamEntry:
    roster = list(players) if players is not None else list(PLAYERS)
    data = {
        "team_name": name,
        "players": roster,
        "captain": roster[0] if roster else "",
        "vice_captain": roster[1] if len(roster) > 1 else "",
    }
    data.update(overrides)
    return TeamEntry(**data)


@pytest.fixture
def team_factory():
    return make_team


@pytest.fixture
def anyio_backend():
    return "asyncio"
