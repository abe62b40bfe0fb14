"""Mental state service for post-game check-ins."""

import logging
from typing import Any

from puckmind.errors import NotFound
from puckmind.models.mental_state import MentalState
from puckmind.services.auth import Principal
from puckmind.services.game_service import get_owned_game
from puckmind.services.validation import validate_mental_state_fields
from puckmind.stores.base import Store

logger = logging.getLogger(__name__)


class MentalStateService:
    """Creates, replaces and patches the single mental state of a game."""

    def __init__(self, store: Store):
        self.store = store

    def upsert(
        self, principal: Principal, game_id: int, data: dict[str, Any]
    ) -> tuple[MentalState, bool]:
        """Create the game's mental state or replace it entirely.

        All five numeric fields are required either way.

        Returns:
            (mental_state, created) where ``created`` is True when the game
            had no mental state before this call.
        """
        game = get_owned_game(self.store, principal, game_id)
        fields = validate_mental_state_fields(data, partial=False)

        created = game.mental_state is None
        mental_state = self.store.save_mental_state(game, fields)
        logger.info(
            f"{'Created' if created else 'Replaced'} mental state for game {game_id}"
        )
        return mental_state, created

    def update(self, principal: Principal, game_id: int, data: dict[str, Any]) -> MentalState:
        """Patch an existing mental state with only the supplied fields."""
        game = get_owned_game(self.store, principal, game_id)
        if game.mental_state is None:
            raise NotFound("Mental state not found for this game")

        fields = validate_mental_state_fields(data, partial=True)
        mental_state = self.store.update_mental_state(game.mental_state, fields)
        logger.info(f"Updated mental state for game {game_id} fields {sorted(fields)}")
        return mental_state
