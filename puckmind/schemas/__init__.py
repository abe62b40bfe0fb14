"""Pydantic schemas for API requests and responses."""

from puckmind.schemas.auth import AuthResponse, SignupResponse, UserLogin, UserResponse
from puckmind.schemas.base import MessageResponse
from puckmind.schemas.dashboard import DashboardResponse
from puckmind.schemas.game import (
    GameDetailResponse,
    GameListResponse,
    GameMessageResponse,
    GameResponse,
)
from puckmind.schemas.mental_state import MentalStateMessageResponse, MentalStateResponse

__all__ = [
    "UserLogin",
    "UserResponse",
    "SignupResponse",
    "AuthResponse",
    "MessageResponse",
    "GameResponse",
    "GameDetailResponse",
    "GameListResponse",
    "GameMessageResponse",
    "MentalStateResponse",
    "MentalStateMessageResponse",
    "DashboardResponse",
]
