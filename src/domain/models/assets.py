"""Domain models for tracked assets."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import SOURCE_MANUAL


@dataclass(frozen=True)
class Asset:
    """A tracked holding with its derived quantity and value.

    Attributes:
        id: Identifier assigned at creation.
        name: Display label.
        category: Free-text grouping key.
        quantity: Unit count derived from the transaction history.
        current_value: Total valuation derived from the transaction history.
            Negative values represent liabilities.
        source_type: How the asset is maintained (e.g. manual).
    """

    id: str
    name: str
    category: str
    quantity: Decimal = Decimal("0")
    current_value: Decimal = Decimal("0")
    source_type: str = SOURCE_MANUAL


@dataclass(frozen=True)
class AssetDraft:
    """User-supplied fields for a new asset."""

    name: str
    category: str = ""
    source_type: str = SOURCE_MANUAL


@dataclass(frozen=True)
class AssetPatch:
    """Partial update for an asset; unset fields keep their value."""

    name: str | None = None
    category: str | None = None
    source_type: str | None = None


@dataclass(frozen=True)
class AssetPosition:
    """Running quantity and value of an asset during replay."""

    quantity: Decimal = Decimal("0")
    value: Decimal = Decimal("0")


__all__ = ["Asset", "AssetDraft", "AssetPatch", "AssetPosition"]
