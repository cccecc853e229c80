"""Team entry record submitted by contest users."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class TeamEntry(BaseModel):
    """A user's eleven-player entry plus its latest score.

    ``team_id`` is assigned by the store on create. Roster rules are checked
    by :func:`fantasy_cricket.contest.submit_team`, not here, so that a
    rejected entry can still be represented and reported.
    """

    team_id: Optional[str] = None
    team_name: str
    players: List[str]
    captain: str
    vice_captain: str
    total_points: int = Field(default=0)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
