"""Replay rules turning a transaction history into asset state.

A transaction only ever touches its own asset:

* ``buy`` adds the quantity and either adds ``amount`` to the value or, when
  ``current_total_value`` is set, replaces the value with it;
* ``sell`` mirrors ``buy`` with subtraction;
* ``update`` replaces the value with ``amount`` and leaves the quantity.

Nothing is clamped, so quantities and values can go negative.
"""

from collections.abc import Iterable
from dataclasses import replace

from src.domain.constants import (
    INITIAL_BALANCE_NOTE,
    TRANSACTION_BUY,
    TRANSACTION_MOVE,
    TRANSACTION_SELL,
    TRANSACTION_UPDATE,
)
from src.domain.models.assets import Asset, AssetPosition
from src.domain.models.transactions import Transaction, TransactionDraft
from src.domain.services.normalization import date_sort_key

ReplayableTransaction = Transaction | TransactionDraft


def apply_transaction(
    position: AssetPosition,
    transaction: ReplayableTransaction,
) -> AssetPosition:
    """Return the position after applying a single transaction.

    Args:
        position: Running state of the transaction's asset.
        transaction: Buy, sell, or update event for that asset.

    Returns:
        AssetPosition: Updated running state.
    """
    if transaction.type == TRANSACTION_BUY:
        value = (
            transaction.current_total_value
            if transaction.current_total_value is not None
            else position.value + transaction.amount
        )
        return AssetPosition(
            quantity=position.quantity + transaction.quantity,
            value=value,
        )
    if transaction.type == TRANSACTION_SELL:
        value = (
            transaction.current_total_value
            if transaction.current_total_value is not None
            else position.value - transaction.amount
        )
        return AssetPosition(
            quantity=position.quantity - transaction.quantity,
            value=value,
        )
    if transaction.type == TRANSACTION_UPDATE:
        return AssetPosition(quantity=position.quantity, value=transaction.amount)
    return position


def apply_to_asset(asset: Asset, transaction: ReplayableTransaction) -> Asset:
    """Return the asset with its cached state advanced by one transaction."""
    position = apply_transaction(
        AssetPosition(quantity=asset.quantity, value=asset.current_value),
        transaction,
    )
    return replace(
        asset,
        quantity=position.quantity,
        current_value=position.value,
    )


def sort_chronologically(
    transactions: Iterable[Transaction],
) -> list[Transaction]:
    """Sort newest-first stored transactions into replay order.

    Ties on the date keep insertion order, oldest recorded first.
    """
    return sorted(
        reversed(list(transactions)),
        key=lambda transaction: date_sort_key(transaction.date),
    )


def replay_assets(
    assets: Iterable[Asset],
    transactions: Iterable[Transaction],
) -> list[Asset]:
    """Rebuild every asset's cached state from the full history.

    Transactions whose asset is unknown are skipped.

    Args:
        assets: Registered assets; their cached state is ignored.
        transactions: Stored transactions in any order.

    Returns:
        list[Asset]: Assets in their original order with derived state.
    """
    asset_list = list(assets)
    positions = {asset.id: AssetPosition() for asset in asset_list}
    for transaction in sort_chronologically(transactions):
        position = positions.get(transaction.asset_id)
        if position is None:
            continue
        positions[transaction.asset_id] = apply_transaction(
            position,
            transaction,
        )
    return [
        replace(
            asset,
            quantity=positions[asset.id].quantity,
            current_value=positions[asset.id].value,
        )
        for asset in asset_list
    ]


def expand_move(draft: TransactionDraft) -> list[TransactionDraft]:
    """Rewrite a move into the sell/buy pair that is actually stored.

    Non-move drafts are returned unchanged as a single-item list.

    Args:
        draft: Draft possibly describing a transfer between two assets.

    Returns:
        list[TransactionDraft]: Drafts to record, in recording order.
    """
    if draft.type != TRANSACTION_MOVE:
        return [draft]
    label = draft.notes or "another asset"
    sell = TransactionDraft(
        asset_id=draft.from_asset_id,
        type=TRANSACTION_SELL,
        date=draft.date,
        amount=draft.amount,
        quantity=draft.quantity,
        notes=f"Move to {label}",
    )
    buy = TransactionDraft(
        asset_id=draft.asset_id,
        type=TRANSACTION_BUY,
        date=draft.date,
        amount=draft.amount,
        quantity=draft.quantity,
        notes=f"Move from {label}",
    )
    return [sell, buy]


def initial_balance_draft(
    asset_id: str,
    value,
    quantity,
    when,
) -> TransactionDraft:
    """Build the opening buy recorded alongside a new asset."""
    return TransactionDraft(
        asset_id=asset_id,
        type=TRANSACTION_BUY,
        date=when,
        amount=value,
        quantity=quantity,
        current_total_value=value,
        notes=INITIAL_BALANCE_NOTE,
    )


__all__ = [
    "apply_transaction",
    "apply_to_asset",
    "sort_chronologically",
    "replay_assets",
    "expand_move",
    "initial_balance_draft",
]
