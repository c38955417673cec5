from fastapi import Depends, HTTPException, status

from fixturedesk.core import security
from fixturedesk.core.config import settings
from fixturedesk.schemas import auth_schemas
from fixturedesk.services.classification_service import ClassificationService
from fixturedesk.services.tournament_service import TournamentService

_tournament_service = None
_classification_service = None

def get_tournament_service() -> TournamentService:
    global _tournament_service
    if _tournament_service is None:
        _tournament_service = TournamentService(data_file_path=settings.DATA_FILE)
    return _tournament_service

def get_classification_service() -> ClassificationService:
    global _classification_service
    if _classification_service is None:
        _classification_service = ClassificationService()
    return _classification_service

def get_current_admin(token: str = Depends(security.oauth2_scheme)) -> auth_schemas.TokenData:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    return security.verify_token(token, credentials_exception)
