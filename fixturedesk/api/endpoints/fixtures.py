from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends

from fixturedesk.api.dependencies import get_current_admin, get_tournament_service
from fixturedesk.api.errors import to_http_exception
from fixturedesk.core.config import settings
from fixturedesk.core.exceptions import FixtureDeskError
from fixturedesk.models.fixture_model import CategoryFixture
from fixturedesk.schemas import auth_schemas, fixture_schemas
from fixturedesk.services import fixture_service
from fixturedesk.services.tournament_service import TournamentService

router = APIRouter()

@router.get("", response_model=List[CategoryFixture])
def list_fixtures(
    category: Optional[str] = None,
    tournament_type: Optional[str] = None,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    return fixture_service.fixtures_for(service.get_data(), category, tournament_type)

@router.post("/generate", response_model=CategoryFixture)
def generate_fixtures(
    request: fixture_schemas.GenerateFixturesRequest,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        data = service.update(
            fixture_service.generate_fixtures,
            request.category,
            request.tournament_type,
            settings.MIN_GROUP_SIZE,
            settings.MAX_GROUP_SIZE,
        )
    except FixtureDeskError as e:
        raise to_http_exception(e)
    return fixture_service.fixtures_for(data, request.category, request.tournament_type)[0]

@router.post("/upload", response_model=List[CategoryFixture])
def upload_fixtures(
    fixtures: Any = Body(...),
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        data = service.update(fixture_service.upload_custom_fixtures, fixtures)
    except FixtureDeskError as e:
        raise to_http_exception(e)
    return data.fixtures
