from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from fixturedesk.models.fixture_model import CategoryFixture
from fixturedesk.models.tournament_model import Player

class SettingsUpdate(BaseModel):
    name: str = Field(..., description="Tournament name")
    types: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)

class PublishStatus(BaseModel):
    can_publish: bool
    reason: Optional[str] = None # First unmet requirement
    is_published: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class PublicTournamentView(BaseModel):
    """What spectators see. Empty until the tournament is published."""
    is_published: bool
    name: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)
    players: List[Player] = Field(default_factory=list)
    fixtures: List[CategoryFixture] = Field(default_factory=list)
    player_names: dict = Field(default_factory=dict) # player id -> display name

    class Config:
        alias_generator = to_camel
        populate_by_name = True
