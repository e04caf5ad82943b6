"""Observer registry notified after every state change."""

from collections.abc import Callable
from itertools import count

from src.domain.models import StoreState

StateListener = Callable[[StoreState], None]


class ObserverRegistry:
    """Ordered set of listeners addressed by subscription tokens."""

    def __init__(self) -> None:
        self._listeners: dict[int, StateListener] = {}
        self._tokens = count(1)

    def add(self, listener: StateListener) -> int:
        """Register a listener and return its token."""
        token = next(self._tokens)
        self._listeners[token] = listener
        return token

    def remove(self, token: int) -> bool:
        """Drop a listener; returns False for unknown tokens."""
        return self._listeners.pop(token, None) is not None

    def snapshot(self) -> list[StateListener]:
        """Return the current listeners in subscription order."""
        return list(self._listeners.values())

    def __len__(self) -> int:
        return len(self._listeners)


__all__ = ["ObserverRegistry", "StateListener"]
