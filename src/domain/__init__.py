"""Domain package for ledger rules and core models."""

from .constants import HISTORY_ALL, TRANSACTION_TYPES
from .errors import (
    InvalidAssetError,
    InvalidTransactionError,
    StatePayloadError,
    TrackerError,
)
from .models import (
    Asset,
    AssetDraft,
    AssetPatch,
    HistorySeries,
    ImportResult,
    NetWorthSummary,
    Settings,
    SettingsPatch,
    StoreState,
    Transaction,
    TransactionDraft,
    TransactionPatch,
)
from .policies import is_transfer_allowed, is_valid_asset_name
from .services import (
    compute_history,
    compute_net_worth_summary,
    expand_move,
    replay_assets,
)

__all__ = [
    "HISTORY_ALL",
    "TRANSACTION_TYPES",
    "InvalidAssetError",
    "InvalidTransactionError",
    "StatePayloadError",
    "TrackerError",
    "Asset",
    "AssetDraft",
    "AssetPatch",
    "HistorySeries",
    "ImportResult",
    "NetWorthSummary",
    "Settings",
    "SettingsPatch",
    "StoreState",
    "Transaction",
    "TransactionDraft",
    "TransactionPatch",
    "is_transfer_allowed",
    "is_valid_asset_name",
    "compute_history",
    "compute_net_worth_summary",
    "expand_move",
    "replay_assets",
]
