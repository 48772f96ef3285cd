"""Unit tests for src/db/database.py"""

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from src.core.config import Settings
from src.db.database import create_session_factory, get_db

IN_MEMORY = Settings(database_url="sqlite:///:memory:")


def test_session_factory_creates_tables() -> None:
    session_factory = create_session_factory(IN_MEMORY)
    with session_factory() as session:
        assert "games" in inspect(session.get_bind()).get_table_names()


def test_get_db_yields_and_closes_a_session() -> None:
    generator = get_db(IN_MEMORY)
    session = next(generator)
    assert isinstance(session, Session)
    generator.close()


def test_session_factory_is_built_once_per_database() -> None:
    first = create_session_factory(IN_MEMORY)
    # settings that do not touch the database share the engine
    assert create_session_factory(Settings(database_url="sqlite:///:memory:", board_size=5)) is first


def test_get_db_reuses_the_engine() -> None:
    first = get_db(IN_MEMORY)
    second = get_db(IN_MEMORY)
    session_a, session_b = next(first), next(second)
    assert session_a is not session_b
    assert session_a.get_bind() is session_b.get_bind()
    first.close()
    second.close()
