"""Port for durable key-value storage of serialized state."""

from typing import Protocol

from src.domain.errors import TrackerError


class StorageError(TrackerError):
    """Raised by storage adapters when the backend cannot be used."""


class StateStoragePort(Protocol):
    """Port exposing get/set of serialized blobs under string keys."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, or None when absent."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""


__all__ = ["StorageError", "StateStoragePort"]
