"""Game service: owner-scoped create/read/update/delete."""

import logging
from typing import Any

from puckmind.errors import Forbidden, NotFound
from puckmind.models.game import Game
from puckmind.services.auth import Principal
from puckmind.services.validation import validate_game_fields
from puckmind.stores.base import Store

logger = logging.getLogger(__name__)


def get_owned_game(store: Store, principal: Principal, game_id: int) -> Game:
    """Fetch a game and check the principal owns it.

    Existence is checked first, so a missing game is a 404 for everyone and
    only an existing game owned by someone else is a 403.
    """
    game = store.get_game(game_id)
    if game is None:
        raise NotFound("Game not found")

    if game.user_id != principal.id:
        logger.warning(f"User {principal.id} denied access to game {game_id}")
        raise Forbidden("You don't have access to this game")

    return game


class GameService:
    """Service for game-related operations."""

    def __init__(self, store: Store):
        self.store = store

    def list_games(self, principal: Principal) -> list[Game]:
        """All of the principal's games, most recent first."""
        return self.store.list_games(principal.id)

    def create(self, principal: Principal, data: dict[str, Any]) -> Game:
        fields = validate_game_fields(data, partial=False)
        game = self.store.add_game(principal.id, fields)
        logger.info(f"Created game {game.id} vs {game.opponent} for user {principal.id}")
        return game

    def get(self, principal: Principal, game_id: int) -> Game:
        return get_owned_game(self.store, principal, game_id)

    def update(self, principal: Principal, game_id: int, data: dict[str, Any]) -> Game:
        """Patch a game; fields absent from ``data`` are left untouched."""
        game = get_owned_game(self.store, principal, game_id)
        fields = validate_game_fields(data, partial=True)
        game = self.store.update_game(game, fields)
        logger.info(f"Updated game {game_id} fields {sorted(fields)}")
        return game

    def delete(self, principal: Principal, game_id: int) -> None:
        game = get_owned_game(self.store, principal, game_id)
        self.store.delete_game(game)
        logger.info(f"Deleted game {game_id} for user {principal.id}")
