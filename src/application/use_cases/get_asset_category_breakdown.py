"""Use case to compute the asset breakdown by category."""

from src.application.services.store import NetWorthStore
from src.domain.models import AssetCategoryAmount, AssetCategoryBreakdown
from src.domain.services import compute_asset_category_breakdown
from src.infrastructure.logging.logger import get_app_logger


class GetAssetCategoryBreakdownUseCase:
    """Aggregate positive asset values by category."""

    def __init__(self, store: NetWorthStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Store holding the cached asset values.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> AssetCategoryBreakdown:
        """Return category totals in the configured currency."""
        state = self._store.state
        breakdown = compute_asset_category_breakdown(
            state.assets,
            currency_code=state.settings.currency,
            logger=self._logger,
        )
        self._logger.info(
            f"Computed breakdown over {len(breakdown.categories)} categories"
        )
        return breakdown


__all__ = [
    "GetAssetCategoryBreakdownUseCase",
    "AssetCategoryBreakdown",
    "AssetCategoryAmount",
]
