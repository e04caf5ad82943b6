"""Application services package."""

from .asset_registry import AssetRegistry
from .history_aggregator import HistoryAggregator
from .observers import ObserverRegistry, StateListener
from .store import DEFAULT_STORAGE_KEY, NetWorthStore, load_store_state
from .transaction_ledger import TransactionLedger

__all__ = [
    "AssetRegistry",
    "HistoryAggregator",
    "ObserverRegistry",
    "StateListener",
    "DEFAULT_STORAGE_KEY",
    "NetWorthStore",
    "load_store_state",
    "TransactionLedger",
]
