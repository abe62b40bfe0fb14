"""SQLAlchemy models."""

from puckmind.models.game import Game
from puckmind.models.mental_state import MentalState
from puckmind.models.user import User

__all__ = [
    "User",
    "Game",
    "MentalState",
]
