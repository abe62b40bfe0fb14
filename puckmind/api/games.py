"""Game API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from puckmind.api.dependencies import get_current_principal, get_game_service
from puckmind.schemas.base import MessageResponse
from puckmind.schemas.game import (
    GameDetailResponse,
    GameListResponse,
    GameMessageResponse,
    GameResponse,
)
from puckmind.services.auth import Principal
from puckmind.services.game_service import GameService

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("", response_model=GameListResponse)
def list_games(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[GameService, Depends(get_game_service)],
):
    """Get all games for the current user, most recent first."""
    games = service.list_games(principal)
    return GameListResponse(games=[GameResponse.model_validate(g) for g in games])


@router.post("", response_model=GameMessageResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    payload: Annotated[dict[str, Any], Body()],
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[GameService, Depends(get_game_service)],
):
    """Log a new game."""
    game = service.create(principal, payload)
    return GameMessageResponse(
        message="Game created successfully",
        game=GameResponse.model_validate(game),
    )


@router.get("/{game_id}", response_model=GameDetailResponse)
def get_game(
    game_id: int,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[GameService, Depends(get_game_service)],
):
    """Get a specific game with its mental state."""
    game = service.get(principal, game_id)
    return GameDetailResponse(game=GameResponse.model_validate(game))


@router.put("/{game_id}", response_model=GameMessageResponse)
def update_game(
    game_id: int,
    payload: Annotated[dict[str, Any], Body()],
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[GameService, Depends(get_game_service)],
):
    """Update any subset of a game's fields."""
    game = service.update(principal, game_id, payload)
    return GameMessageResponse(
        message="Game updated successfully",
        game=GameResponse.model_validate(game),
    )


@router.delete("/{game_id}", response_model=MessageResponse)
def delete_game(
    game_id: int,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[GameService, Depends(get_game_service)],
):
    """Delete a game and its mental state."""
    service.delete(principal, game_id)
    return MessageResponse(message="Game deleted successfully")
