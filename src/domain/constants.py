"""Domain constants for the net worth ledger."""

TRANSACTION_BUY = "buy"
TRANSACTION_SELL = "sell"
TRANSACTION_UPDATE = "update"
TRANSACTION_MOVE = "move"

TRANSACTION_TYPES = (
    TRANSACTION_BUY,
    TRANSACTION_SELL,
    TRANSACTION_UPDATE,
    TRANSACTION_MOVE,
)

# Types that can be persisted; moves are expanded before storage.
STORED_TRANSACTION_TYPES = (
    TRANSACTION_BUY,
    TRANSACTION_SELL,
    TRANSACTION_UPDATE,
)

SOURCE_MANUAL = "manual"

HISTORY_ALL = "all"

DEFAULT_CURRENCY = "EUR"
DEFAULT_THEME = "dark"
DEFAULT_CATEGORY = "Uncategorized"

INITIAL_BALANCE_NOTE = "Initial Balance"


__all__ = [
    "TRANSACTION_BUY",
    "TRANSACTION_SELL",
    "TRANSACTION_UPDATE",
    "TRANSACTION_MOVE",
    "TRANSACTION_TYPES",
    "STORED_TRANSACTION_TYPES",
    "SOURCE_MANUAL",
    "HISTORY_ALL",
    "DEFAULT_CURRENCY",
    "DEFAULT_THEME",
    "DEFAULT_CATEGORY",
    "INITIAL_BALANCE_NOTE",
]
