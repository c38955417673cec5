from datetime import datetime, timezone
from typing import List, Optional
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from fixturedesk.core.identifiers import new_id

class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    # Requested through a status update; stored as COMPLETED with a canonical score pair
    WALKOVER_P1 = "walkover_p1"
    WALKOVER_P2 = "walkover_p2"
    DISQUALIFIED = "disqualified"

class MatchOutcome(str, Enum):
    REGULAR = "regular"
    WALKOVER_P1 = "walkover_p1"
    WALKOVER_P2 = "walkover_p2"
    DISQUALIFIED = "disqualified"

class MatchHistoryEntry(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    changed_by: str
    old_score1: Optional[int] = None
    old_score2: Optional[int] = None
    old_status: str
    new_score1: Optional[int] = None
    new_score2: Optional[int] = None
    new_status: str
    reason: str

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True

class Group(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    player_ids: List[str] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Match(BaseModel):
    id: str = Field(default_factory=new_id)
    category: str
    tournament_type: str
    group_name: str = ""

    player1_id: str
    player2_id: str

    score1: Optional[int] = Field(default=None, ge=0)
    score2: Optional[int] = Field(default=None, ge=0)

    status: MatchStatus = MatchStatus.SCHEDULED
    outcome: Optional[MatchOutcome] = None # Set once the match is completed

    history: List[MatchHistoryEntry] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True
        validate_default = True

    @field_validator("history", mode="before")
    @classmethod
    def history_defaults_to_empty(cls, v):
        # Externally supplied fixtures may carry "history": null
        return [] if v is None else v

    def involves(self, player_id: str) -> bool:
        return player_id in (self.player1_id, self.player2_id)

class CategoryFixture(BaseModel):
    category: str
    tournament_type: str
    groups: List[Group] = Field(default_factory=list)
    matches: List[Match] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @property
    def key(self):
        return (self.category, self.tournament_type)
