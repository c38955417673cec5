from typing import Dict, List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from fixturedesk.api.dependencies import get_current_admin, get_tournament_service
from fixturedesk.api.errors import to_http_exception
from fixturedesk.core.config import settings
from fixturedesk.core.exceptions import FixtureDeskError
from fixturedesk.models.tournament_model import Player
from fixturedesk.schemas import auth_schemas, player_schemas
from fixturedesk.services import player_service
from fixturedesk.services.tournament_service import TournamentService

router = APIRouter()

@router.get("", response_model=List[Player])
def list_players(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    return service.get_data().players

@router.post("", response_model=Player, status_code=status.HTTP_201_CREATED)
def create_player(
    player_in: player_schemas.PlayerCreate,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        _, player = service.update(player_service.add_player, player_in, settings.MAX_CATEGORIES_PER_PLAYER)
    except FixtureDeskError as e:
        raise to_http_exception(e)
    return player

@router.get("/category-counts", response_model=player_schemas.CategoryCountsResponse)
def get_category_counts(
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    return player_service.category_counts(service.get_data(), settings.PLAYER_LIMIT_PER_CATEGORY)

@router.post("/import", response_model=player_schemas.ImportReport)
def import_players(
    file: UploadFile = File(...),
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        csv_text = file.file.read().decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="The CSV file must be UTF-8 encoded.")

    try:
        _, report = service.update(
            player_service.import_players_from_csv, csv_text, settings.MAX_CATEGORIES_PER_PLAYER
        )
    except FixtureDeskError as e:
        raise to_http_exception(e)
    return report

@router.put("/{player_id}", response_model=Player)
def update_player(
    player_id: str,
    player_in: player_schemas.PlayerUpdate,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        _, player = service.update(
            player_service.update_player, player_id, player_in, settings.MAX_CATEGORIES_PER_PLAYER
        )
    except FixtureDeskError as e:
        raise to_http_exception(e)
    return player

@router.delete("/{player_id}", response_model=Dict[str, str])
def delete_player(
    player_id: str,
    service: TournamentService = Depends(get_tournament_service),
    admin: auth_schemas.TokenData = Depends(get_current_admin),
):
    try:
        service.update(player_service.delete_player, player_id, settings.MIN_GROUP_SIZE)
    except FixtureDeskError as e:
        raise to_http_exception(e)
    return {"message": "Player deleted successfully"}
