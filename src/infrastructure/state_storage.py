"""Key-value storage adapters for the serialized tracker state."""

from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.state_storage import StateStoragePort, StorageError


CREATE_APP_STATE_SQL = """
CREATE TABLE IF NOT EXISTS app_state (
    state_key TEXT PRIMARY KEY,
    state_value TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_STATE_SQL = text(
    """
    SELECT state_value
    FROM app_state
    WHERE state_key = :state_key
    """
)

DELETE_STATE_SQL = text(
    """
    DELETE FROM app_state
    WHERE state_key = :state_key
    """
)

INSERT_STATE_SQL = text(
    """
    INSERT INTO app_state (state_key, state_value, updated_at)
    VALUES (:state_key, :state_value, :updated_at)
    """
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SqlAlchemyStateStorage(StateStoragePort):
    """State storage backed by a single SQLAlchemy table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the storage adapter.

        Args:
            db_port: Port providing access to the state engine.
            clock: Optional provider of update timestamps.
        """
        self._db_port = db_port
        self._clock = clock or _utc_now
        self._prepared = False

    def get(self, key: str) -> str | None:
        """Return the stored value for a key.

        Raises:
            StorageError: If the database cannot be read.
        """
        try:
            engine = self._prepared_engine()
            with engine.connect() as conn:
                row = conn.execute(SELECT_STATE_SQL, {"state_key": key}).first()
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(f"Could not read {key!r}: {exc}") from exc
        return row.state_value if row is not None else None

    def set(self, key: str, value: str) -> None:
        """Replace the stored value for a key in one transaction.

        Raises:
            StorageError: If the database cannot be written.
        """
        params = {
            "state_key": key,
            "state_value": value,
            "updated_at": self._clock().isoformat(),
        }
        try:
            engine = self._prepared_engine()
            with engine.begin() as conn:
                conn.execute(DELETE_STATE_SQL, {"state_key": key})
                conn.execute(INSERT_STATE_SQL, params)
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(f"Could not write {key!r}: {exc}") from exc

    def _prepared_engine(self) -> Engine:
        """Return the engine, creating the state table on first use."""
        engine = self._db_port.get_state_engine()
        if not self._prepared:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_APP_STATE_SQL)
            self._prepared = True
        return engine


class InMemoryStateStorage(StateStoragePort):
    """Process-local storage; contents are lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


__all__ = [
    "SqlAlchemyStateStorage",
    "InMemoryStateStorage",
    "CREATE_APP_STATE_SQL",
    "SELECT_STATE_SQL",
    "DELETE_STATE_SQL",
    "INSERT_STATE_SQL",
]
