from fastapi import APIRouter, Depends

from fixturedesk.api.dependencies import get_current_admin, get_tournament_service
from fixturedesk.api.errors import to_http_exception
from fixturedesk.core.exceptions import FixtureDeskError
from fixturedesk.models.tournament_model import TournamentData
from fixturedesk.schemas import auth_schemas, tournament_schemas
from fixturedesk.services.tournament_service import TournamentService

router = APIRouter()

@router.get("", response_model=TournamentData)
def get_tournament(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    return service.get_data()

@router.put("/settings", response_model=TournamentData)
def save_settings(
    settings_in: tournament_schemas.SettingsUpdate,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        return service.save_settings(settings_in)
    except FixtureDeskError as e:
        raise to_http_exception(e)

@router.get("/publish-status", response_model=tournament_schemas.PublishStatus)
def get_publish_status(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    return service.get_publish_status()

@router.post("/publish", response_model=TournamentData)
def publish_tournament(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        return service.publish()
    except FixtureDeskError as e:
        raise to_http_exception(e)

@router.post("/unpublish", response_model=TournamentData)
def unpublish_tournament(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    return service.unpublish()

@router.delete("", response_model=TournamentData)
def reset_tournament(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    return service.reset()
