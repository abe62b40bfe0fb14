"""Mental state API endpoints, nested under a game."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status

from puckmind.api.dependencies import get_current_principal, get_mental_state_service
from puckmind.schemas.mental_state import MentalStateMessageResponse, MentalStateResponse
from puckmind.services.auth import Principal
from puckmind.services.mental_state_service import MentalStateService

router = APIRouter(prefix="/api/games/{game_id}/mental", tags=["mental-state"])


@router.post("", response_model=MentalStateMessageResponse, status_code=status.HTTP_201_CREATED)
def save_mental_state(
    game_id: int,
    payload: Annotated[dict[str, Any], Body()],
    response: Response,
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[MentalStateService, Depends(get_mental_state_service)],
):
    """Create or replace the mental state for a game.

    Responds 201 when the game had no mental state yet, 200 when it was replaced.
    """
    mental_state, created = service.upsert(principal, game_id, payload)
    if not created:
        response.status_code = status.HTTP_200_OK

    return MentalStateMessageResponse(
        message=(
            "Mental state created successfully"
            if created
            else "Mental state updated successfully"
        ),
        mental_state=MentalStateResponse.model_validate(mental_state),
    )


@router.put("", response_model=MentalStateMessageResponse)
def update_mental_state(
    game_id: int,
    payload: Annotated[dict[str, Any], Body()],
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[MentalStateService, Depends(get_mental_state_service)],
):
    """Update some fields of an existing mental state."""
    mental_state = service.update(principal, game_id, payload)
    return MentalStateMessageResponse(
        message="Mental state updated successfully",
        mental_state=MentalStateResponse.model_validate(mental_state),
    )
