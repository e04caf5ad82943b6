"""Tests for the GetNetWorthTrendUseCase."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.services.store import NetWorthStore
from src.application.use_cases.get_net_worth_trend import GetNetWorthTrendUseCase
from src.domain.models import AssetDraft, StoreState, TransactionDraft

_TODAY = date(2024, 6, 15)


class _MemoryStorage:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


def _store() -> NetWorthStore:
    return NetWorthStore(
        StoreState(),
        _MemoryStorage(),
        logger=MagicMock(),
        today=lambda: _TODAY,
        clock=lambda: datetime(2024, 6, 15, tzinfo=timezone.utc),
    )


def _draft(asset_id, when, amount, tx_type="buy") -> TransactionDraft:
    return TransactionDraft(
        asset_id=asset_id,
        type=tx_type,
        date=when,
        amount=Decimal(amount),
    )


def test_execute_compares_with_previous_month() -> None:
    store = _store()
    cash = store.add_asset(AssetDraft(name="Cash"))
    stocks = store.add_asset(AssetDraft(name="Stocks"))
    store.add_transaction(_draft(cash.id, "2024-05-01", "1000"))
    store.add_transaction(_draft(stocks.id, "2024-06-01", "500"))

    use_case = GetNetWorthTrendUseCase(
        store,
        logger=MagicMock(),
        today=lambda: _TODAY,
    )
    overall = use_case.execute()
    single = use_case.execute(cash.id)

    assert overall.current == Decimal("1500")
    assert overall.baseline == Decimal("1000")
    assert overall.percent_change == Decimal("50")
    assert single.current == Decimal("1000")
    assert single.percent_change == Decimal("0")


def test_execute_without_baseline_reports_unavailable() -> None:
    store = _store()
    cash = store.add_asset(AssetDraft(name="Cash"))
    store.add_transaction(_draft(cash.id, "2024-06-10", "100"))
    logger = MagicMock()

    trend = GetNetWorthTrendUseCase(
        store,
        logger=logger,
        today=lambda: _TODAY,
    ).execute()

    assert trend.percent_change is None
    assert trend.difference == Decimal("100")
    logger.info.assert_called_once()
