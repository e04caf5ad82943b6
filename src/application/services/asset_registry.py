"""Identity and metadata management for tracked assets."""

from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

from src.domain.errors import InvalidAssetError
from src.domain.models import Asset, AssetDraft, AssetPatch, StoreState
from src.domain.policies import is_valid_asset_name
from src.domain.services import total_net_worth


class AssetRegistry:
    """View over the store state managing asset records.

    Values and quantities are never edited here; they are derived by the
    transaction ledger.
    """

    def __init__(self, state: StoreState) -> None:
        """Initialize the registry.

        Args:
            state: Aggregate state shared with the ledger.
        """
        self._state = state

    def add(self, draft: AssetDraft) -> Asset:
        """Create an asset with zero quantity and value.

        Args:
            draft: Name, category, and source type of the asset.

        Returns:
            Asset: The stored record with its new id.

        Raises:
            InvalidAssetError: If the name is blank.
        """
        if not is_valid_asset_name(draft.name):
            raise InvalidAssetError("Asset name must not be blank")
        asset = Asset(
            id=str(uuid4()),
            name=draft.name.strip(),
            category=(draft.category or "").strip(),
            quantity=Decimal("0"),
            current_value=Decimal("0"),
            source_type=draft.source_type,
        )
        self._state.assets = [*self._state.assets, asset]
        return asset

    def edit(self, asset_id: str, patch: AssetPatch) -> bool:
        """Merge metadata fields into an asset.

        Returns:
            bool: False when no asset has this id.
        """
        if patch.name is not None and not is_valid_asset_name(patch.name):
            raise InvalidAssetError("Asset name must not be blank")
        for index, asset in enumerate(self._state.assets):
            if asset.id != asset_id:
                continue
            self._state.assets[index] = replace(
                asset,
                name=patch.name.strip() if patch.name is not None else asset.name,
                category=(
                    patch.category.strip()
                    if patch.category is not None
                    else asset.category
                ),
                source_type=(
                    patch.source_type
                    if patch.source_type is not None
                    else asset.source_type
                ),
            )
            return True
        return False

    def delete(self, asset_id: str) -> int | None:
        """Remove an asset and every transaction referencing it.

        Transactions are removed when the asset is their target or their
        transfer source.

        Returns:
            int | None: Number of transactions removed, or None when no
            asset has this id.
        """
        if self._state.find_asset(asset_id) is None:
            return None
        self._state.assets = [
            asset for asset in self._state.assets if asset.id != asset_id
        ]
        kept = [
            transaction
            for transaction in self._state.transactions
            if transaction.asset_id != asset_id
            and transaction.from_asset_id != asset_id
        ]
        removed = len(self._state.transactions) - len(kept)
        self._state.transactions = kept
        return removed

    def get(self, asset_id: str) -> Asset | None:
        """Return the asset with this id, if any."""
        return self._state.find_asset(asset_id)

    def assets(self) -> list[Asset]:
        """Return all assets in creation order."""
        return list(self._state.assets)

    @property
    def total_net_worth(self) -> Decimal:
        """Sum of cached values across all assets."""
        return total_net_worth(self._state.assets)


__all__ = ["AssetRegistry"]
