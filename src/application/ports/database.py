"""Database ports for the net worth tracker.

This module defines the application-layer protocol for reaching the database
engine. Infrastructure implementations provide concrete adapters that
satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine that stores the tracker state."""

    def get_state_engine(self) -> Engine:
        """Get the engine for the state database.

        Returns:
            Engine: SQLAlchemy engine connected to the state database.
        """


__all__ = ["DatabaseEnginePort"]
