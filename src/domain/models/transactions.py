"""Domain models for ledger transactions."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

TransactionDate = date | datetime


@dataclass(frozen=True)
class Transaction:
    """A stored, dated event changing an asset's derived state.

    Attributes:
        id: Identifier assigned when the transaction is recorded.
        timestamp: Moment the transaction was recorded.
        asset_id: Target asset.
        type: One of buy, sell or update.
        date: Calendar date or date-time of the event.
        amount: Value delta (buy/sell) or absolute value (update).
        quantity: Unit delta, zero when not applicable.
        from_asset_id: Transfer source kept for reference.
        current_total_value: Absolute value override applied by replay
            instead of accumulating ``amount``.
        notes: Free text.
    """

    id: str
    timestamp: datetime
    asset_id: str
    type: str
    date: TransactionDate
    amount: Decimal
    quantity: Decimal = Decimal("0")
    from_asset_id: str | None = None
    current_total_value: Decimal | None = None
    notes: str = ""


@dataclass(frozen=True)
class TransactionDraft:
    """Input for a new transaction, before id assignment."""

    asset_id: str
    type: str
    date: TransactionDate
    amount: Decimal
    quantity: Decimal = Decimal("0")
    from_asset_id: str | None = None
    current_total_value: Decimal | None = None
    notes: str = ""


@dataclass(frozen=True)
class TransactionPatch:
    """Partial update for a transaction; unset fields keep their value."""

    asset_id: str | None = None
    type: str | None = None
    date: TransactionDate | None = None
    amount: Decimal | None = None
    quantity: Decimal | None = None
    from_asset_id: str | None = None
    current_total_value: Decimal | None = None
    notes: str | None = None


__all__ = [
    "Transaction",
    "TransactionDate",
    "TransactionDraft",
    "TransactionPatch",
]
