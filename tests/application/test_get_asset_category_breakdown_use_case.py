"""Tests for the GetAssetCategoryBreakdownUseCase."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.get_asset_category_breakdown import (
    GetAssetCategoryBreakdownUseCase,
)
from src.domain.models import Asset, StoreState


def test_execute_groups_positive_assets_by_category() -> None:
    """Liabilities and empty assets should not appear in the breakdown."""
    assets = [
        Asset(id="1", name="Checking", category="Cash", current_value=Decimal("120")),
        Asset(id="2", name="Savings", category="Cash", current_value=Decimal("80")),
        Asset(id="3", name="ETF", category="Stocks", current_value=Decimal("300")),
        Asset(id="4", name="Loan", category="Debt", current_value=Decimal("-500")),
        Asset(id="5", name="Wallet", category="", current_value=Decimal("15")),
    ]
    store = SimpleNamespace(state=StoreState(assets=assets))
    logger = MagicMock()

    breakdown = GetAssetCategoryBreakdownUseCase(store, logger=logger).execute()

    assert breakdown.currency_code == "EUR"
    amounts = {item.category: item.amount for item in breakdown.categories}
    assert amounts == {
        "Cash": Decimal("200"),
        "Stocks": Decimal("300"),
        "Uncategorized": Decimal("15"),
    }
    counts = {item.category: item.asset_count for item in breakdown.categories}
    assert counts["Cash"] == 2
