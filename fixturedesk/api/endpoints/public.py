from typing import Optional

from fastapi import APIRouter, Depends

from fixturedesk.api.dependencies import get_tournament_service
from fixturedesk.schemas import tournament_schemas
from fixturedesk.services.tournament_service import TournamentService

router = APIRouter()

@router.get("/tournament", response_model=tournament_schemas.PublicTournamentView)
def get_public_tournament(
    category: Optional[str] = None,
    group: Optional[str] = None,
    search: Optional[str] = None,
    service: TournamentService = Depends(get_tournament_service),
):
    return service.get_public_view(category=category, group_name=group, search=search)
