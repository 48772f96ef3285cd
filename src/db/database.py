"""Generate database session"""

from functools import cache
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


@cache
def _session_factory(database_url: str, echo: bool) -> sessionmaker[Session]:
    engine = create_engine(database_url, echo=echo)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)


def create_session_factory(settings: Settings) -> sessionmaker[Session]:
    """
    Engine + session factory for the configured database. Ensures all tables are created.

    Built once per database URL, later calls share the same engine and connection pool.
    """
    return _session_factory(settings.database_url, settings.sql_echo)


def get_db(settings: Optional[Settings] = None) -> Generator[Session, None, None]:
    session_factory = create_session_factory(settings or Settings.from_env())
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
