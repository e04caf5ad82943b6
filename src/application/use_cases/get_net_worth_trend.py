"""Use case to compute the month-over-month net worth trend."""

from collections.abc import Callable
from datetime import date

from src.application.services.store import NetWorthStore
from src.domain.constants import HISTORY_ALL
from src.domain.models import NetWorthTrend
from src.domain.services import compute_monthly_trend
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthTrendUseCase:
    """Compare current value with the value one month earlier."""

    def __init__(
        self,
        store: NetWorthStore,
        logger=None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store providing history and current values.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Optional provider of the reference date.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._today = today or date.today

    def execute(self, asset_id: str = HISTORY_ALL) -> NetWorthTrend:
        """Return the trend for all assets or a single asset.

        Args:
            asset_id: ``"all"`` or the id of one asset.

        Returns:
            NetWorthTrend: Current value, baseline, and percent change.
        """
        history = self._store.get_history(asset_id)
        if asset_id == HISTORY_ALL:
            current = self._store.total_net_worth
        else:
            asset = self._store.state.find_asset(asset_id)
            current = history.values[-1] if asset is None else asset.current_value
        trend = compute_monthly_trend(history, current, today=self._today())
        if trend.percent_change is None:
            self._logger.info("No baseline one month ago; trend unavailable")
        return trend


__all__ = ["GetNetWorthTrendUseCase", "NetWorthTrend"]
