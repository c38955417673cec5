import logging
import os
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from fixturedesk.api.dependencies import get_tournament_service
from fixturedesk.api.endpoints import analysis as analysis_endpoints
from fixturedesk.api.endpoints import auth as auth_endpoints
from fixturedesk.api.endpoints import exports as export_endpoints
from fixturedesk.api.endpoints import fixtures as fixture_endpoints
from fixturedesk.api.endpoints import matches as match_endpoints
from fixturedesk.api.endpoints import players as player_endpoints
from fixturedesk.api.endpoints import public as public_endpoints
from fixturedesk.api.endpoints import tournament as tournament_endpoints
from fixturedesk.core.config import settings
from fixturedesk.services.tournament_service import TournamentService

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Fixture Desk API")

templates = Jinja2Templates(directory=os.path.join(os.path.dirname(__file__), "templates"))

# Include routers
app.include_router(auth_endpoints.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(tournament_endpoints.router, prefix="/api/tournament", tags=["Tournament"])
app.include_router(player_endpoints.router, prefix="/api/players", tags=["Players"])
app.include_router(fixture_endpoints.router, prefix="/api/fixtures", tags=["Fixtures"])
app.include_router(match_endpoints.router, prefix="/api/matches", tags=["Matches"])
app.include_router(export_endpoints.router, prefix="/api/exports", tags=["Exports"])
app.include_router(public_endpoints.router, prefix="/api/public", tags=["Public"])
app.include_router(analysis_endpoints.router, prefix="/api/analysis", tags=["Image Analysis"])

@app.get("/")
def root():
    return {"message": "Fixture Desk API"}

@app.get("/public", response_class=HTMLResponse)
def public_page(
    request: Request,
    category: Optional[str] = None,
    group: Optional[str] = None,
    search: Optional[str] = None,
    service: TournamentService = Depends(get_tournament_service),
):
    view = service.get_public_view(category=category, group_name=group, search=search)
    return templates.TemplateResponse(
        request,
        "public.html",
        {
            "view": view,
            "category": category or "",
            "group": group or "",
            "search": search or "",
        },
    )
