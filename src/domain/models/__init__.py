"""Domain models package."""

from .assets import Asset, AssetDraft, AssetPatch, AssetPosition
from .finance import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    HistorySeries,
    NetWorthSummary,
    NetWorthTrend,
)
from .state import ImportResult, Settings, SettingsPatch, StoreState
from .transactions import (
    Transaction,
    TransactionDate,
    TransactionDraft,
    TransactionPatch,
)

__all__ = [
    "Asset",
    "AssetDraft",
    "AssetPatch",
    "AssetPosition",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "HistorySeries",
    "NetWorthSummary",
    "NetWorthTrend",
    "ImportResult",
    "Settings",
    "SettingsPatch",
    "StoreState",
    "Transaction",
    "TransactionDate",
    "TransactionDraft",
    "TransactionPatch",
]
