from __future__ import annotations

from typing import List

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from fantasy_cricket.models import TeamEntry


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TeamEntryRequest(_CamelModel):
    team_name: str
    players: List[str]
    captain: str
    vice_captain: str

    def to_entry(self) -> TeamEntry:
        return TeamEntry(
            team_name=self.team_name,
            players=list(self.players),
            captain=self.captain,
            vice_captain=self.vice_captain,
        )


class TeamEntryResponse(_CamelModel):
    team_id: str | None
    team_name: str
    players: List[str]
    captain: str
    vice_captain: str
    total_points: int

    @classmethod
    def from_entry(cls, entry: TeamEntry) -> "TeamEntryResponse":
        return cls.model_validate(entry.model_dump())


class TeamCreatedResponse(_CamelModel):
    message: str
    team_id: str | None = None


class ProcessResultResponse(_CamelModel):
    message: str
    teams_processed: int


class ErrorResponse(BaseModel):
    error: str
