"""SqlStore tests against the test database."""

from datetime import UTC, datetime

import pytest

from puckmind.models.game import Game
from puckmind.models.mental_state import MentalState
from puckmind.models.user import User
from puckmind.stores.sql import SqlStore

FIELDS = {
    "confidence": 6,
    "sleep_hours": 7.0,
    "sleep_quality": 6,
    "stress_level": 4,
    "physical_energy": 7,
    "notes": None,
}


@pytest.fixture
def game_id(db):
    user = User(
        email="store@example.com",
        password_hash="x",
        name="Store Player",
        team="Wildcats",
        position="Defense",
    )
    db.add(user)
    db.commit()
    game = Game(
        user_id=user.id,
        date=datetime(2024, 1, 1, tzinfo=UTC),
        opponent="Rangers",
        home_away="home",
        result="win",
    )
    db.add(game)
    db.commit()
    return game.id


def test_save_mental_state_creates_then_replaces(db, game_id):
    store = SqlStore(db)
    game = store.get_game(game_id)

    created = store.save_mental_state(game, FIELDS)
    replaced = store.save_mental_state(store.get_game(game_id), {**FIELDS, "confidence": 9})

    assert replaced.id == created.id
    assert replaced.confidence == 9
    assert db.query(MentalState).filter(MentalState.game_id == game_id).count() == 1


def test_concurrent_first_save_keeps_last_write(db, game_id, session_factory):
    """Two sessions that both saw no mental state end up with one row."""
    first_session = session_factory()
    second_session = session_factory()
    try:
        first, second = SqlStore(first_session), SqlStore(second_session)
        first_game = first.get_game(game_id)
        second_game = second.get_game(game_id)
        assert first_game.mental_state is None
        assert second_game.mental_state is None

        first.save_mental_state(first_game, {**FIELDS, "confidence": 4})
        saved = second.save_mental_state(second_game, {**FIELDS, "confidence": 9, "notes": "late"})

        assert saved.confidence == 9
        assert saved.notes == "late"
    finally:
        first_session.close()
        second_session.close()

    db.expire_all()
    rows = db.query(MentalState).filter(MentalState.game_id == game_id).all()
    assert [(row.confidence, row.notes) for row in rows] == [(9, "late")]
