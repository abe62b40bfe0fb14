"""Game schemas."""

from datetime import datetime

from puckmind.schemas.base import CamelModel
from puckmind.schemas.mental_state import MentalStateResponse


class GameResponse(CamelModel):
    """Game response, with its mental state when one was recorded."""

    id: int
    user_id: int
    date: datetime
    opponent: str
    home_away: str
    result: str
    goals: int
    assists: int
    shots: int
    plus_minus: int
    ice_time: float
    points: int
    created_at: datetime
    updated_at: datetime
    mental_state: MentalStateResponse | None = None


class GameDetailResponse(CamelModel):
    game: GameResponse


class GameListResponse(CamelModel):
    games: list[GameResponse]


class GameMessageResponse(CamelModel):
    """Game created or updated."""

    message: str
    game: GameResponse
