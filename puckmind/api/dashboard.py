"""Dashboard API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from puckmind.api.dependencies import get_current_principal, get_game_service
from puckmind.schemas.dashboard import DashboardResponse
from puckmind.services.auth import Principal
from puckmind.services.game_service import GameService
from puckmind.services.insights import build_dashboard

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[GameService, Depends(get_game_service)],
):
    """Summary stats and mental-state insights for the current user."""
    games = service.list_games(principal)
    return DashboardResponse.model_validate(build_dashboard(games))
