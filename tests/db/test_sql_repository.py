"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from src.core.shared_types import Status
from src.db.sql_repository import GameModel, SQLGameRepository


@pytest.fixture
def model() -> GameModel:
    """Mock game data. NOTE: repository does not check any game logic, so the content does not need to be a legal game"""
    return GameModel(
        board_size=3,
        position="XO./.../...",
        moves=["X:0:0:10", "O:1:0:10"],
        next_player="X",
        status=Status.IN_PROGRESS,
    )


def test_create_game(db_session_repo: Session, model: GameModel) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session, model: GameModel) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(model)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(model)
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session, model: GameModel) -> None:
    """Update an earlier created record."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    updated = GameModel(
        board_size=3,
        position="XO./X../...",
        moves=model.moves + ["X:0:1:10"],
        next_player="O",
        status=Status.IN_PROGRESS,
    )
    record = repo.update_game(game_id, updated)
    assert record == updated
    assert repo.get_game(game_id) == updated


def test_update_stores_outcome(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    finished = GameModel(
        board_size=3,
        position="XXX/OO./...",
        moves=["X:0:0:1", "O:0:1:1", "X:1:0:1", "O:1:1:1", "X:2:0:1"],
        next_player="O",
        status=Status.WON,
        winner="X",
    )
    repo.update_game(game_id, finished)
    stored = repo.get_game(game_id)
    assert stored is not None
    assert stored.status == "won"
    assert stored.winner == "X"


def test_update_keeps_board_size_and_turn_enforcement(db_session_repo: Session, model: GameModel) -> None:
    """Both are fixed when the game is created, an update only replaces the snapshot of the play."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    changed = GameModel(
        board_size=5,
        position="XO./X../...",
        moves=model.moves + ["X:0:1:10"],
        next_player="O",
        status=Status.IN_PROGRESS,
        strict_turns=False,
    )
    record = repo.update_game(game_id, changed)
    assert record is not None
    assert record.board_size == 3
    assert record.strict_turns
    assert record.moves == changed.moves


def test_update_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), model) is None


def test_strict_turns_flag_is_stored(db_session_repo: Session) -> None:
    lenient = GameModel(
        board_size=4,
        position="..../..../..../....",
        moves=[],
        next_player="X",
        status=Status.IN_PROGRESS,
        strict_turns=False,
    )
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(lenient)
    stored = repo.get_game(game_id)
    assert stored is not None
    assert not stored.strict_turns
    assert stored.board_size == 4


def test_delete_game(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    deleted = repo.delete_game(game_id)
    assert deleted == model
    assert repo.get_game(game_id) is None
    # deleting twice is harmless
    assert repo.delete_game(game_id) is None
