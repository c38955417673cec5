from fastapi import APIRouter, Depends
from fastapi.responses import Response

from fixturedesk.api.dependencies import get_current_admin, get_tournament_service
from fixturedesk.api.errors import to_http_exception
from fixturedesk.core.exceptions import ExportError
from fixturedesk.schemas import auth_schemas
from fixturedesk.services import export_service
from fixturedesk.services.tournament_service import TournamentService

router = APIRouter()

def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

@router.get("/players.csv")
def export_players(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        return _csv_response(export_service.export_players(service.get_data()), "players_data.csv")
    except ExportError as e:
        raise to_http_exception(e)

@router.get("/fixtures.csv")
def export_fixtures(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        return _csv_response(export_service.export_groups(service.get_data()), "fixtures_data.csv")
    except ExportError as e:
        raise to_http_exception(e)

@router.get("/matches.csv")
def export_matches(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        return _csv_response(export_service.export_match_results(service.get_data()), "match_results_data.csv")
    except ExportError as e:
        raise to_http_exception(e)
