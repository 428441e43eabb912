"""
Response models for the merged board feed.

Fields are snake_case in Python and serialized camelCase on the wire
(``away_team`` → ``awayTeam``).
"""
from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float]
ScoreLabel = Literal["Score unavailable", "Estimated", "Live"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreBlock(CamelModel):
    """Score shown on the board. ``away`` and ``home`` are null together."""
    away: Optional[Number] = None
    home: Optional[Number] = None
    label: ScoreLabel = "Score unavailable"


class MoneylineBlock(CamelModel):
    """Head-to-head moneyline prices (American odds)."""
    away: Optional[Number] = None
    home: Optional[Number] = None


class MergedGame(CamelModel):
    """One live game joined with its odds."""
    id: Optional[Union[int, str]] = None
    away_team: str = ""
    home_team: str = ""
    score: ScoreBlock = Field(default_factory=ScoreBlock)
    status: str = ""
    moneyline: MoneylineBlock = Field(default_factory=MoneylineBlock)


class BoardResponse(CamelModel):
    """Envelope returned by GET /api/board."""
    generated_at: str = Field(..., description="ISO-8601 UTC timestamp, millisecond precision")
    games: List[MergedGame]


class BoardError(BaseModel):
    """Body returned when the board cannot be built."""
    error: str = "Failed to load board"
    message: str


def iso_timestamp(moment: datetime) -> str:
    """Format a UTC datetime as e.g. 2026-01-29T19:00:00.000Z."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
