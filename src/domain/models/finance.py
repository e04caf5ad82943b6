"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of positive asset values.
        liability_total: Absolute sum of negative asset values.
        net_worth: Assets minus liabilities.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class AssetCategoryAmount:
    """Amount aggregated for a given asset category."""

    category: str
    amount: Decimal
    asset_count: int = 0


@dataclass(frozen=True)
class AssetCategoryBreakdown:
    """Breakdown of asset amounts by category."""

    currency_code: str
    categories: list[AssetCategoryAmount]


@dataclass(frozen=True)
class HistorySeries:
    """Chronological series of aggregate values for charting.

    Attributes:
        labels: ISO calendar dates, one per day with activity plus today.
        values: Aggregate value recorded for each label.
    """

    labels: list[str]
    values: list[Decimal]

    def points(self) -> list[tuple[str, Decimal]]:
        """Return (label, value) pairs."""
        return list(zip(self.labels, self.values))


@dataclass(frozen=True)
class NetWorthTrend:
    """Net worth change against the value one month earlier."""

    current: Decimal
    baseline: Decimal
    percent_change: Decimal | None

    @property
    def difference(self) -> Decimal:
        """Return current minus baseline."""
        return self.current - self.baseline


__all__ = [
    "NetWorthSummary",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "HistorySeries",
    "NetWorthTrend",
]
