"""Use case to summarize net worth from the store."""

from src.application.services.store import NetWorthStore
from src.domain.models import NetWorthSummary
from src.domain.services import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute asset, liability, and net worth totals."""

    def __init__(self, store: NetWorthStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Store holding the cached asset values.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> NetWorthSummary:
        """Return the net worth summary in the configured currency.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        state = self._store.state
        summary = compute_net_worth_summary(
            state.assets,
            currency_code=state.settings.currency,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
