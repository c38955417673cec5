from fastapi import APIRouter, Depends, HTTPException, status

from fixturedesk.api.dependencies import get_current_admin, get_tournament_service
from fixturedesk.api.errors import to_http_exception
from fixturedesk.core.exceptions import FixtureDeskError
from fixturedesk.models.fixture_model import Match
from fixturedesk.schemas import auth_schemas, fixture_schemas
from fixturedesk.services import fixture_service, match_service
from fixturedesk.services.tournament_service import TournamentService

router = APIRouter()

@router.patch("/{match_id}", response_model=Match)
def update_match(
    match_id: str,
    request: fixture_schemas.MatchUpdateRequest,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        data = service.update(
            match_service.update_match, match_id, request.field, request.value, changed_by="Admin"
        )
    except FixtureDeskError as e:
        raise to_http_exception(e)
    return fixture_service.find_match(data, match_id)

@router.get("/{match_id}/history", response_model=fixture_schemas.MatchHistoryResponse)
def get_match_history(
    match_id: str,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    match = fixture_service.find_match(service.get_data(), match_id)
    if not match:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Match with ID {match_id} not found.")
    return fixture_schemas.MatchHistoryResponse(match_id=match.id, history=match.history)
