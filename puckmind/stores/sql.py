"""SQLAlchemy-backed store."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from puckmind.errors import Conflict
from puckmind.models.game import Game
from puckmind.models.mental_state import MentalState
from puckmind.models.user import User
from puckmind.stores.base import Store

logger = logging.getLogger(__name__)


class SqlStore(Store):
    """Store that reads and writes through a request-scoped session."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get_user(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def add_user(self, fields: dict[str, Any]) -> User:
        user = User(**fields)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict("User with this email already exists") from None
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def list_games(self, user_id: int) -> list[Game]:
        return (
            self.db.query(Game)
            .options(joinedload(Game.mental_state))
            .filter(Game.user_id == user_id)
            .order_by(Game.date.desc(), Game.id.desc())
            .all()
        )

    def get_game(self, game_id: int) -> Game | None:
        return (
            self.db.query(Game)
            .options(joinedload(Game.mental_state))
            .filter(Game.id == game_id)
            .first()
        )

    def add_game(self, user_id: int, fields: dict[str, Any]) -> Game:
        game = Game(user_id=user_id, **fields)
        self.db.add(game)
        self._commit()
        self.db.refresh(game)
        return game

    def update_game(self, game: Game, fields: dict[str, Any]) -> Game:
        for name, value in fields.items():
            setattr(game, name, value)
        self._commit()
        self.db.refresh(game)
        return game

    def delete_game(self, game: Game) -> None:
        self.db.delete(game)
        self._commit()

    def save_mental_state(self, game: Game, fields: dict[str, Any]) -> MentalState:
        game_id = game.id
        mental_state = game.mental_state
        if mental_state is None:
            game.mental_state = MentalState(**fields)
            try:
                self.db.commit()
            except IntegrityError:
                # Another request inserted this game's row first; overwrite it
                self.db.rollback()
                mental_state = (
                    self.db.query(MentalState).filter(MentalState.game_id == game_id).first()
                )
                if mental_state is None:
                    raise
                logger.info(f"Mental state for game {game_id} was created concurrently")
            except SQLAlchemyError:
                self.db.rollback()
                raise
            else:
                mental_state = game.mental_state
                self.db.refresh(mental_state)
                return mental_state

        for name, value in fields.items():
            setattr(mental_state, name, value)
        self._commit()
        self.db.refresh(mental_state)
        return mental_state

    def update_mental_state(self, mental_state: MentalState, fields: dict[str, Any]) -> MentalState:
        for name, value in fields.items():
            setattr(mental_state, name, value)
        self._commit()
        self.db.refresh(mental_state)
        return mental_state
