"""Domain services for finance aggregates."""

import calendar
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import TRANSACTION_BUY, TRANSACTION_SELL
from src.domain.models import (
    Asset,
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    HistorySeries,
    NetWorthSummary,
    NetWorthTrend,
    Transaction,
)
from src.domain.services.normalization import date_sort_key, normalize_category


def total_net_worth(assets: Iterable[Asset]) -> Decimal:
    """Return the sum of cached values across assets (may be negative)."""
    return sum((asset.current_value for asset in assets), Decimal("0"))


def compute_net_worth_summary(
    assets: Iterable[Asset],
    *,
    currency_code: str,
) -> NetWorthSummary:
    """Split cached asset values into assets and liabilities.

    Args:
        assets: Registered assets with their cached values.
        currency_code: Display currency of the totals.

    Returns:
        NetWorthSummary: Positive values as assets, negative ones as
        liabilities, and their difference.
    """
    asset_total = Decimal("0")
    liability_total = Decimal("0")
    for asset in assets:
        if asset.current_value >= 0:
            asset_total += asset.current_value
        else:
            liability_total += abs(asset.current_value)
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


def compute_asset_category_breakdown(
    assets: Iterable[Asset],
    *,
    currency_code: str,
    logger: Logger,
) -> AssetCategoryBreakdown:
    """Aggregate positive asset values by category.

    Args:
        assets: Registered assets with their cached values.
        currency_code: Display currency of the totals.
        logger: Logger used for skipped liabilities.

    Returns:
        AssetCategoryBreakdown: Category totals sorted by category name.
    """
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    skipped = 0
    for asset in assets:
        if asset.current_value <= 0:
            if asset.current_value < 0:
                skipped += 1
            continue
        category = normalize_category(asset.category)
        totals[category] = totals.get(category, Decimal("0")) + asset.current_value
        counts[category] = counts.get(category, 0) + 1
    if skipped:
        logger.info(f"Skipped {skipped} liabilities in category breakdown")

    categories = [
        AssetCategoryAmount(
            category=category,
            amount=amount,
            asset_count=counts[category],
        )
        for category, amount in sorted(totals.items())
    ]
    return AssetCategoryBreakdown(
        currency_code=currency_code,
        categories=categories,
    )


def compute_monthly_trend(
    history: HistorySeries,
    current: Decimal,
    *,
    today: date,
) -> NetWorthTrend:
    """Compare the current value with the history one month earlier.

    The baseline is the last history value dated on or before the same day
    of the previous month. Without a non-zero baseline the percentage is
    None.

    Args:
        history: Chronological series, labels as ISO dates.
        current: Current aggregate value.
        today: Reference date.

    Returns:
        NetWorthTrend: Current value, baseline, and percentage change.
    """
    cutoff = one_month_before(today).isoformat()
    baseline = Decimal("0")
    for label, value in history.points():
        if label <= cutoff:
            baseline = value
    if baseline == 0:
        percent = None
    else:
        percent = (current - baseline) / abs(baseline) * Decimal("100")
    return NetWorthTrend(
        current=current,
        baseline=baseline,
        percent_change=percent,
    )


def one_month_before(day: date) -> date:
    """Return the same day of the previous month, clamped to month end."""
    year = day.year if day.month > 1 else day.year - 1
    month = day.month - 1 if day.month > 1 else 12
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def compute_cost_basis(
    transactions: Iterable[Transaction],
    asset_id: str,
) -> Decimal:
    """Return money put into an asset: buy amounts minus sell amounts."""
    invested = Decimal("0")
    received = Decimal("0")
    for transaction in transactions:
        if transaction.asset_id != asset_id:
            continue
        if transaction.type == TRANSACTION_BUY:
            invested += transaction.amount
        elif transaction.type == TRANSACTION_SELL:
            received += transaction.amount
    return invested - received


def filter_transactions(
    transactions: Iterable[Transaction],
    *,
    asset_id: str | None = None,
    transaction_type: str | None = None,
    search: str | None = None,
) -> list[Transaction]:
    """Return matching transactions, newest date first.

    Args:
        transactions: Stored transactions.
        asset_id: Keep only transactions targeting this asset.
        transaction_type: Keep only transactions of this type.
        search: Case-insensitive substring looked up in the notes.

    Returns:
        list[Transaction]: Filtered transactions.
    """
    needle = (search or "").strip().lower()
    ordered = sorted(
        transactions,
        key=lambda transaction: date_sort_key(transaction.date),
        reverse=True,
    )
    matches = []
    for transaction in ordered:
        if asset_id and transaction.asset_id != asset_id:
            continue
        if transaction_type and transaction.type != transaction_type:
            continue
        if needle and needle not in (transaction.notes or "").lower():
            continue
        matches.append(transaction)
    return matches


def held_assets(assets: Iterable[Asset]) -> list[Asset]:
    """Return assets that still hold value or units."""
    return [
        asset
        for asset in assets
        if asset.current_value > 0 or asset.quantity > 0
    ]


__all__ = [
    "total_net_worth",
    "compute_net_worth_summary",
    "compute_asset_category_breakdown",
    "compute_monthly_trend",
    "one_month_before",
    "compute_cost_basis",
    "filter_transactions",
    "held_assets",
]
