"""Database infrastructure for the net worth tracker.

This module creates and reuses the SQLAlchemy engine holding the serialized
tracker state. Any SQLAlchemy URL works; the default is a local SQLite file.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import TrackerSettings


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a SQLite database file.

    Args:
        db_url: Database URL; non-SQLite and in-memory URLs are ignored.
    """
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    _ensure_sqlite_directory(db_url)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_state_engine: Optional[Engine] = None


def get_state_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the state database.

    Returns:
        Engine: Lazily initialized engine connected to the state database.
    """
    global _state_engine
    if _state_engine is None:
        settings = TrackerSettings.from_env()
        _state_engine = _create_engine(settings.database_url)
    return _state_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application code depends only on the protocol.
    """

    def get_state_engine(self) -> Engine:
        """Get the engine for the state database.

        Returns:
            Engine: SQLAlchemy engine connected to the state database.
        """
        return get_state_engine()


__all__ = [
    "get_state_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
