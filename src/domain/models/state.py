"""Domain models for the aggregate tracker state."""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_THEME
from src.domain.models.assets import Asset
from src.domain.models.transactions import Transaction


@dataclass(frozen=True)
class Settings:
    """User preferences stored next to the ledger.

    Attributes:
        currency: Display currency code.
        theme: UI theme name.
        provider_key: Free-form key for an external price provider.
        last_price_update: Moment prices were last refreshed, if ever.
    """

    currency: str = DEFAULT_CURRENCY
    theme: str = DEFAULT_THEME
    provider_key: str = ""
    last_price_update: datetime | None = None


@dataclass(frozen=True)
class SettingsPatch:
    """Partial update for settings; unset fields keep their value."""

    currency: str | None = None
    theme: str | None = None
    provider_key: str | None = None
    last_price_update: datetime | None = None


@dataclass
class StoreState:
    """Aggregate root holding assets, transactions, and settings.

    Transactions are kept newest-first (display order); the date field is
    the logical ordering key.
    """

    assets: list[Asset] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)

    def replace_with(self, other: "StoreState") -> None:
        """Swap in the content of another state, keeping this identity."""
        self.assets = list(other.assets)
        self.transactions = list(other.transactions)
        self.settings = other.settings

    def find_asset(self, asset_id: str | None) -> Asset | None:
        """Return the asset with the given id, if present."""
        for asset in self.assets:
            if asset.id == asset_id:
                return asset
        return None

    def find_transaction(self, transaction_id: str) -> Transaction | None:
        """Return the transaction with the given id, if present."""
        for transaction in self.transactions:
            if transaction.id == transaction_id:
                return transaction
        return None


@dataclass(frozen=True)
class ImportResult:
    """Outcome of replacing the state from a serialized snapshot."""

    success: bool
    error: str | None = None


__all__ = ["Settings", "SettingsPatch", "StoreState", "ImportResult"]
