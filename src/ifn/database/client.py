from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def get_engine(database_url: str) -> Engine:
    """Engine for the record store. Schema is owned by the store, never created here."""
    return create_engine(database_url, future=True)


@contextmanager
def session_context(database_url: str) -> Generator[Session, None, None]:
    """
    Context manager for read-only SQLAlchemy sessions.

    Owns one engine for the lifetime of the block. Rolls back on error, then
    closes the session and disposes the engine. Errors raised by the store are
    re-raised unchanged.

    Usage:
        with session_context(database_url) as session:
            rows = get_all(session, "programme")
    """
    engine = get_engine(database_url)
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
        engine.dispose()
