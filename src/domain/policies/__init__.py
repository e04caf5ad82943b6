"""Domain policies package."""

from .ledger_rules import (
    is_known_transaction_type,
    is_transfer_allowed,
    is_valid_asset_name,
)

__all__ = [
    "is_known_transaction_type",
    "is_transfer_allowed",
    "is_valid_asset_name",
]
