from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from fixturedesk.core.identifiers import new_id
from fixturedesk.models.fixture_model import CategoryFixture

DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

class TournamentSettings(BaseModel):
    name: str = DEFAULT_TOURNAMENT_NAME
    types: List[str] = Field(default_factory=list) # e.g. "Singles", "Doubles"
    categories: List[str] = Field(default_factory=list) # e.g. "Open", "40+"

class Player(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    mobile: str
    categories: List[str] = Field(default_factory=list)
    fee_paid: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class TournamentData(BaseModel):
    """The whole persisted tournament: the only root that owns players and fixtures."""
    settings: TournamentSettings = Field(default_factory=TournamentSettings)
    players: List[Player] = Field(default_factory=list)
    fixtures: List[CategoryFixture] = Field(default_factory=list)
    is_published: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def get_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def player_name(self, player_id: str) -> str:
        player = self.get_player(player_id)
        if player:
            return player.name
        return f"Unknown Player (ID: {player_id[:4] if player_id else 'N/A'})"
