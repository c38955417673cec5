from typing import List, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from fixturedesk.models.fixture_model import MatchHistoryEntry

class GenerateFixturesRequest(BaseModel):
    category: str = Field(..., description="Player category to generate fixtures for")
    tournament_type: str = Field(..., description="Tournament type, e.g. Singles")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class MatchUpdateRequest(BaseModel):
    """Updates one field of a match. Scores may be sent as numbers or raw form text."""
    field: str = Field(..., description="score1, score2 or status")
    value: Optional[Union[int, float, str]] = None

class MatchHistoryResponse(BaseModel):
    match_id: str
    history: List[MatchHistoryEntry]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
