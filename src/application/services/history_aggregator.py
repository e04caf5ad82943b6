"""Time series queries over the store state."""

from collections.abc import Callable, Collection
from datetime import date

from src.domain.constants import HISTORY_ALL
from src.domain.models import HistorySeries, StoreState
from src.domain.services import compute_history


class HistoryAggregator:
    """Read-only view building chart series from the ledger."""

    def __init__(
        self,
        state: StoreState,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the aggregator.

        Args:
            state: Aggregate state to read.
            today: Optional provider of the current calendar date.
        """
        self._state = state
        self._today = today or date.today

    def history(self, asset_id: str = HISTORY_ALL) -> HistorySeries:
        """Return the series for all assets or for a single asset id."""
        return compute_history(
            self._state.assets,
            self._state.transactions,
            asset_id,
            today=self._today(),
        )

    def history_for_assets(self, asset_ids: Collection[str]) -> HistorySeries:
        """Return the summed series of an arbitrary subset of assets."""
        if isinstance(asset_ids, str):
            asset_ids = [asset_ids]
        return compute_history(
            self._state.assets,
            self._state.transactions,
            frozenset(asset_ids),
            today=self._today(),
        )


__all__ = ["HistoryAggregator"]
