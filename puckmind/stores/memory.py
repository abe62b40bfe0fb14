"""In-memory store for development without a database.

Selected explicitly with ``STORE_BACKEND=memory``. Data lives for the life of
the process and is lost on restart.
"""

import threading
from datetime import UTC, datetime
from typing import Any

from puckmind.errors import Conflict
from puckmind.models.game import Game
from puckmind.models.mental_state import MentalState
from puckmind.models.user import User
from puckmind.stores.base import Store


class InMemoryStore(Store):
    """Store holding transient model instances in dicts.

    One lock serializes every operation, which gives each call the same
    all-or-nothing behaviour a database transaction would.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._games: dict[int, Game] = {}
        self._next_id = {"users": 1, "games": 1, "mental_states": 1}

    def _allocate_id(self, table: str) -> int:
        value = self._next_id[table]
        self._next_id[table] = value + 1
        return value

    @staticmethod
    def _touch(obj: Any, created: bool = False) -> None:
        now = datetime.now(UTC)
        if created:
            obj.created_at = now
        obj.updated_at = now

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            return next((u for u in self._users.values() if u.email == email), None)

    def add_user(self, fields: dict[str, Any]) -> User:
        with self._lock:
            if any(u.email == fields["email"] for u in self._users.values()):
                raise Conflict("User with this email already exists")
            user = User(id=self._allocate_id("users"), **fields)
            self._touch(user, created=True)
            self._users[user.id] = user
            return user

    def list_games(self, user_id: int) -> list[Game]:
        with self._lock:
            games = [g for g in self._games.values() if g.user_id == user_id]
        return sorted(games, key=lambda g: (g.date, g.id), reverse=True)

    def get_game(self, game_id: int) -> Game | None:
        with self._lock:
            return self._games.get(game_id)

    def add_game(self, user_id: int, fields: dict[str, Any]) -> Game:
        with self._lock:
            game = Game(id=self._allocate_id("games"), user_id=user_id, **fields)
            self._touch(game, created=True)
            self._games[game.id] = game
            return game

    def update_game(self, game: Game, fields: dict[str, Any]) -> Game:
        with self._lock:
            for name, value in fields.items():
                setattr(game, name, value)
            self._touch(game)
            return game

    def delete_game(self, game: Game) -> None:
        with self._lock:
            # The mental state hangs off the game object and goes with it.
            self._games.pop(game.id, None)

    def save_mental_state(self, game: Game, fields: dict[str, Any]) -> MentalState:
        with self._lock:
            mental_state = game.mental_state
            if mental_state is None:
                mental_state = MentalState(
                    id=self._allocate_id("mental_states"), game_id=game.id, **fields
                )
                self._touch(mental_state, created=True)
                game.mental_state = mental_state
            else:
                for name, value in fields.items():
                    setattr(mental_state, name, value)
                self._touch(mental_state)
            return mental_state

    def update_mental_state(self, mental_state: MentalState, fields: dict[str, Any]) -> MentalState:
        with self._lock:
            for name, value in fields.items():
                setattr(mental_state, name, value)
            self._touch(mental_state)
            return mental_state
