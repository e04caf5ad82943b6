"""Application use cases package."""

from .get_asset_category_breakdown import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    GetAssetCategoryBreakdownUseCase,
)
from .get_net_worth_summary import GetNetWorthSummaryUseCase, NetWorthSummary
from .get_net_worth_trend import GetNetWorthTrendUseCase, NetWorthTrend
from .sync_backup import SyncBackupResult, SyncBackupUseCase

__all__ = [
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "GetAssetCategoryBreakdownUseCase",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetNetWorthTrendUseCase",
    "NetWorthTrend",
    "SyncBackupResult",
    "SyncBackupUseCase",
]
