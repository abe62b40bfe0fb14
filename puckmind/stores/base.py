"""Persistence interface shared by the SQL and in-memory stores."""

from abc import ABC, abstractmethod
from typing import Any

from puckmind.models.game import Game
from puckmind.models.mental_state import MentalState
from puckmind.models.user import User


class Store(ABC):
    """Entity CRUD for users, games and their mental states.

    Games are always returned with ``mental_state`` populated (or ``None``).
    Deleting a game removes its mental state with it.
    """

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Get a user by id."""

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""

    @abstractmethod
    def add_user(self, fields: dict[str, Any]) -> User:
        """Insert a user; raises Conflict when the email is taken."""

    @abstractmethod
    def list_games(self, user_id: int) -> list[Game]:
        """All games owned by a user, most recent first."""

    @abstractmethod
    def get_game(self, game_id: int) -> Game | None:
        """Get a game by id regardless of owner."""

    @abstractmethod
    def add_game(self, user_id: int, fields: dict[str, Any]) -> Game:
        """Insert a game owned by ``user_id``."""

    @abstractmethod
    def update_game(self, game: Game, fields: dict[str, Any]) -> Game:
        """Apply only the given fields to an existing game."""

    @abstractmethod
    def delete_game(self, game: Game) -> None:
        """Delete a game and its mental state."""

    @abstractmethod
    def save_mental_state(self, game: Game, fields: dict[str, Any]) -> MentalState:
        """Create the game's mental state, or replace every field of the existing one."""

    @abstractmethod
    def update_mental_state(self, mental_state: MentalState, fields: dict[str, Any]) -> MentalState:
        """Apply only the given fields to an existing mental state."""
