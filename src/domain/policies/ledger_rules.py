"""Policies deciding which ledger inputs may be recorded."""

from src.domain.constants import TRANSACTION_TYPES


def is_valid_asset_name(name: str | None) -> bool:
    """Return True when the asset name has visible characters."""
    return bool(name and name.strip())


def is_known_transaction_type(transaction_type: str | None) -> bool:
    """Return True for buy, sell, update, and move."""
    return transaction_type in TRANSACTION_TYPES


def is_transfer_allowed(
    source_asset_id: str | None,
    destination_asset_id: str | None,
) -> bool:
    """Return True when a move has a source distinct from its destination.

    Args:
        source_asset_id: Asset the value leaves.
        destination_asset_id: Asset the value enters.

    Returns:
        bool: True when both ends are set and differ.
    """
    if not source_asset_id or not destination_asset_id:
        return False
    return source_asset_id != destination_asset_id
