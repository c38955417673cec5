from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from fixturedesk.models.tournament_model import Player

class PlayerCreate(BaseModel):
    name: str = Field(..., description="Player's full name")
    mobile: str = Field(..., description="Mobile number, unique per registration")
    categories: List[str] = Field(default_factory=list, description="One or two categories from the tournament settings")
    fee_paid: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class PlayerUpdate(PlayerCreate):
    pass

class SkippedRow(BaseModel):
    line: int # 1-based line number in the uploaded file, header is line 1
    reason: str
    name: Optional[str] = None

class ImportReport(BaseModel):
    added: List[Player] = Field(default_factory=list)
    skipped: List[SkippedRow] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class CategoryCount(BaseModel):
    category: str
    count: int
    over_limit: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class CategoryCountsResponse(BaseModel):
    limit: int
    counts: List[CategoryCount]
    categories_over_limit: List[str] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
