"""Store facade owning the tracker state.

The store is the only entry point for mutations. Each mutation runs to
completion against the in-memory state, then every subscriber is called
with the state and the state is written to durable storage. Storage
failures are logged and never undo the in-memory change.
"""

from collections.abc import Callable, Collection
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from src.application.ports.state_storage import StateStoragePort, StorageError
from src.application.services.asset_registry import AssetRegistry
from src.application.services.history_aggregator import HistoryAggregator
from src.application.services.observers import ObserverRegistry, StateListener
from src.application.services.transaction_ledger import TransactionLedger
from src.domain.constants import HISTORY_ALL
from src.domain.errors import InvalidTransactionError, StatePayloadError
from src.domain.models import (
    Asset,
    AssetDraft,
    AssetPatch,
    HistorySeries,
    ImportResult,
    Settings,
    SettingsPatch,
    StoreState,
    Transaction,
    TransactionDraft,
    TransactionPatch,
)
from src.domain.services import (
    compute_cost_basis,
    decode_state_document,
    dump_state,
    filter_transactions,
    held_assets,
    initial_balance_draft,
    state_from_payload,
    state_to_payload,
    validate_state_payload,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

DEFAULT_STORAGE_KEY = "net_worth_tracker_v1"


def load_store_state(
    storage: StateStoragePort,
    key: str = DEFAULT_STORAGE_KEY,
    logger=None,
) -> StoreState:
    """Read the persisted state, falling back to an empty state.

    Args:
        storage: Durable key-value storage.
        key: Key holding the serialized state.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        StoreState: Stored state merged over defaults, or a fresh state when
        nothing usable is stored.
    """
    resolved_logger = logger or get_app_logger()
    try:
        raw = storage.get(key)
    except StorageError as exc:
        resolved_logger.error(f"Failed to load state: {exc}")
        return StoreState()
    if not raw:
        return StoreState()
    try:
        payload = decode_state_document(raw)
        if not isinstance(payload, dict):
            raise StatePayloadError("Stored state is not an object")
        state = state_from_payload(payload)
    except StatePayloadError as exc:
        resolved_logger.error(f"Failed to load state: {exc}")
        return StoreState()
    resolved_logger.info(
        f"Loaded {len(state.assets)} assets and "
        f"{len(state.transactions)} transactions"
    )
    return state


class NetWorthStore:
    """Single owner of the tracker state."""

    def __init__(
        self,
        state: StoreState,
        storage: StateStoragePort,
        logger=None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        today: Callable[[], date] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            state: Aggregate state owned by this store from now on.
            storage: Durable storage written after every mutation.
            logger: Optional logger compatible with logging.Logger-like API.
            storage_key: Key holding the serialized state.
            today: Optional provider of the current calendar date.
            clock: Optional provider of record timestamps.
        """
        self._state = state
        self._storage = storage
        self._logger = logger or get_app_logger()
        self._storage_key = storage_key
        self._today = today or date.today
        self._observers = ObserverRegistry()
        self._assets = AssetRegistry(state)
        self._ledger = TransactionLedger(state, logger=self._logger, clock=clock)
        self._history = HistoryAggregator(state, today=self._today)

    @property
    def state(self) -> StoreState:
        """The live state; treat it as read-only."""
        return self._state

    # --- Subscriptions ---

    def subscribe(self, listener: StateListener) -> int:
        """Register a listener called with the state after each mutation.

        Returns:
            int: Token to pass to ``unsubscribe``.
        """
        return self._observers.add(listener)

    def unsubscribe(self, token: int) -> bool:
        """Remove a listener; returns False for unknown tokens."""
        return self._observers.remove(token)

    def notify(self) -> None:
        """Call every subscriber with the state, then persist it."""
        for listener in self._observers.snapshot():
            try:
                listener(self._state)
            except Exception as exc:
                self._logger.error(f"State listener failed: {exc!r}")
        self._persist()

    # --- Assets ---

    def add_asset(self, draft: AssetDraft) -> Asset:
        """Create an asset with zero value and quantity."""
        asset = self._assets.add(draft)
        self._logger.info(f"Added asset {asset.id} ({asset.name})")
        self.notify()
        return asset

    def add_asset_with_initial_balance(
        self,
        draft: AssetDraft,
        initial_value=None,
        initial_quantity=None,
        when=None,
    ) -> Asset:
        """Create an asset and record its opening balance.

        An opening ``buy`` with an absolute value override is recorded when
        the initial value or quantity is positive. A rejected opening balance
        leaves no asset behind.

        Args:
            draft: Asset metadata.
            initial_value: Opening total value.
            initial_quantity: Opening unit count.
            when: Date of the opening balance; defaults to today.

        Returns:
            Asset: The asset with its opening state applied.

        Raises:
            InvalidTransactionError: If the opening balance is invalid.
        """
        try:
            value = coerce_decimal(initial_value)
            quantity = coerce_decimal(initial_quantity)
        except ValueError as exc:
            raise InvalidTransactionError(str(exc)) from exc
        asset = self._assets.add(draft)
        if value > 0 or quantity > 0:
            try:
                self._ledger.append(
                    initial_balance_draft(
                        asset.id,
                        value,
                        quantity,
                        when if when is not None else self._today(),
                    )
                )
            except InvalidTransactionError:
                self._assets.delete(asset.id)
                raise
        self._logger.info(
            f"Added asset {asset.id} ({asset.name}) with opening value {value}"
        )
        self.notify()
        return self._assets.get(asset.id)

    def edit_asset(self, asset_id: str, patch: AssetPatch) -> bool:
        """Update an asset's metadata; no-op for unknown ids."""
        if not self._assets.edit(asset_id, patch):
            return False
        self.notify()
        return True

    def delete_asset(self, asset_id: str) -> bool:
        """Delete an asset and every transaction referencing it."""
        removed = self._assets.delete(asset_id)
        if removed is None:
            return False
        self._logger.info(
            f"Deleted asset {asset_id} and {removed} related transactions"
        )
        self.notify()
        return True

    # --- Transactions ---

    def add_transaction(self, draft: TransactionDraft) -> list[Transaction]:
        """Record a transaction; a move is stored as a sell/buy pair."""
        recorded = self._ledger.append(draft)
        self._logger.info(
            f"Recorded {len(recorded)} transaction(s) of type {draft.type}"
        )
        self.notify()
        return recorded

    def edit_transaction(
        self,
        transaction_id: str,
        patch: TransactionPatch,
    ) -> bool:
        """Update a transaction and rebuild all assets; no-op if unknown."""
        if not self._ledger.edit(transaction_id, patch):
            return False
        self.notify()
        return True

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction and rebuild all assets; no-op if unknown."""
        if not self._ledger.delete(transaction_id):
            return False
        self.notify()
        return True

    def recalculate(self) -> None:
        """Rebuild every asset from the full transaction history."""
        self._ledger.recalculate()
        self.notify()

    # --- Settings ---

    def edit_settings(self, patch: SettingsPatch) -> None:
        """Merge settings fields; unset fields keep their value."""
        current = self._state.settings
        self._state.settings = Settings(
            currency=patch.currency or current.currency,
            theme=patch.theme or current.theme,
            provider_key=(
                patch.provider_key
                if patch.provider_key is not None
                else current.provider_key
            ),
            last_price_update=(
                patch.last_price_update
                if patch.last_price_update is not None
                else current.last_price_update
            ),
        )
        self.notify()

    # --- Queries ---

    @property
    def total_net_worth(self) -> Decimal:
        """Sum of cached values across all assets."""
        return self._assets.total_net_worth

    def get_history(self, asset_id: str = HISTORY_ALL) -> HistorySeries:
        """Return the daily series for all assets or one asset."""
        return self._history.history(asset_id)

    def get_history_for_assets(
        self,
        asset_ids: Collection[str],
    ) -> HistorySeries:
        """Return the daily series summed over a subset of assets."""
        return self._history.history_for_assets(asset_ids)

    def cost_basis(self, asset_id: str) -> Decimal:
        """Return buy amounts minus sell amounts for an asset."""
        return compute_cost_basis(self._state.transactions, asset_id)

    def filter_transactions(
        self,
        asset_id: str | None = None,
        transaction_type: str | None = None,
        search: str | None = None,
    ) -> list[Transaction]:
        """Return matching transactions, newest date first."""
        return filter_transactions(
            self._state.transactions,
            asset_id=asset_id,
            transaction_type=transaction_type,
            search=search,
        )

    def held_assets(self) -> list[Asset]:
        """Return assets with positive value or quantity."""
        return held_assets(self._state.assets)

    # --- Import / export ---

    def export_state(self) -> str:
        """Return the full state as pretty-printed JSON."""
        return dump_state(self._state)

    def export_payload(self) -> dict[str, Any]:
        """Return the full state as a JSON-ready mapping."""
        return state_to_payload(self._state)

    def import_state(self, document: str) -> ImportResult:
        """Replace the state from a JSON document.

        The state is left untouched when the document is invalid.
        """
        try:
            payload = decode_state_document(document)
        except StatePayloadError as exc:
            self._logger.error(f"Import failed: {exc}")
            return ImportResult(success=False, error=str(exc))
        return self.import_payload(payload)

    def import_payload(self, payload: Any) -> ImportResult:
        """Replace the state from a decoded document.

        Snapshots restored from a backup go through here as well.
        """
        reason = validate_state_payload(payload)
        if reason is not None:
            self._logger.error(f"Import failed: {reason}")
            return ImportResult(success=False, error=reason)
        try:
            imported = state_from_payload(payload)
        except StatePayloadError as exc:
            self._logger.error(f"Import failed: {exc}")
            return ImportResult(success=False, error=str(exc))
        self._state.replace_with(imported)
        self._logger.info(
            f"Imported {len(imported.assets)} assets and "
            f"{len(imported.transactions)} transactions"
        )
        self.notify()
        return ImportResult(success=True)

    def _persist(self) -> None:
        try:
            self._storage.set(self._storage_key, dump_state(self._state))
        except StorageError as exc:
            self._logger.error(f"Failed to save state: {exc}")


__all__ = ["DEFAULT_STORAGE_KEY", "NetWorthStore", "load_store_state"]
