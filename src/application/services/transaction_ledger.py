"""Transaction log with incremental and full replay of asset state."""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from src.domain.constants import STORED_TRANSACTION_TYPES, TRANSACTION_MOVE
from src.domain.errors import InvalidTransactionError
from src.domain.models import (
    Transaction,
    TransactionDraft,
    TransactionPatch,
    StoreState,
)
from src.domain.policies import is_known_transaction_type, is_transfer_allowed
from src.domain.services import (
    apply_to_asset,
    expand_move,
    parse_transaction_date,
    replay_assets,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TransactionLedger:
    """View over the store state owning the transaction log.

    Appends update the target asset incrementally. Edits and deletes rebuild
    every asset from the full history because a changed transaction can
    alter the effect of later ones.
    """

    def __init__(
        self,
        state: StoreState,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the ledger.

        Args:
            state: Aggregate state shared with the asset registry.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional source of record timestamps.
        """
        self._state = state
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def append(self, draft: TransactionDraft) -> list[Transaction]:
        """Record a transaction, expanding moves into a sell/buy pair.

        Every part is validated before anything is stored.

        Args:
            draft: Transaction input.

        Returns:
            list[Transaction]: Stored records, in recording order.

        Raises:
            InvalidTransactionError: If the type is unknown, an asset does
                not exist, or a move has no distinct source.
        """
        normalized = self._normalize_draft(draft)
        self._validate_draft(normalized)
        parts = expand_move(normalized)
        for part in parts:
            self._validate_draft(part)
        return [self._record(part) for part in parts]

    def edit(self, transaction_id: str, patch: TransactionPatch) -> bool:
        """Merge a patch into a stored transaction and replay everything.

        When the stored record carries an absolute value override and the
        patch changes ``amount``, the override follows the new amount.

        Returns:
            bool: False when no transaction has this id.

        Raises:
            InvalidTransactionError: If the merged record would be invalid.
        """
        for index, existing in enumerate(self._state.transactions):
            if existing.id != transaction_id:
                continue
            merged = self._merge(existing, patch)
            if merged.type not in STORED_TRANSACTION_TYPES:
                raise InvalidTransactionError(
                    f"Cannot store a transaction of type {merged.type!r}"
                )
            self._require_asset(merged.asset_id)
            self._state.transactions[index] = merged
            self.recalculate()
            return True
        return False

    def delete(self, transaction_id: str) -> bool:
        """Remove a transaction and replay everything.

        Returns:
            bool: False when no transaction has this id.
        """
        kept = [
            transaction
            for transaction in self._state.transactions
            if transaction.id != transaction_id
        ]
        if len(kept) == len(self._state.transactions):
            return False
        self._state.transactions = kept
        self.recalculate()
        return True

    def recalculate(self) -> None:
        """Rebuild every asset's quantity and value from the full history."""
        asset_ids = {asset.id for asset in self._state.assets}
        orphaned = sum(
            1
            for transaction in self._state.transactions
            if transaction.asset_id not in asset_ids
        )
        if orphaned:
            self._logger.warning(
                f"Skipped {orphaned} transactions referencing unknown assets"
            )
        self._state.assets = replay_assets(
            self._state.assets,
            self._state.transactions,
        )
        self._logger.info(
            f"Recalculated {len(self._state.assets)} assets from "
            f"{len(self._state.transactions)} transactions"
        )

    def get(self, transaction_id: str) -> Transaction | None:
        """Return the transaction with this id, if any."""
        return self._state.find_transaction(transaction_id)

    def _record(self, draft: TransactionDraft) -> Transaction:
        transaction = Transaction(
            id=str(uuid4()),
            timestamp=self._clock(),
            asset_id=draft.asset_id,
            type=draft.type,
            date=draft.date,
            amount=draft.amount,
            quantity=draft.quantity,
            from_asset_id=draft.from_asset_id,
            current_total_value=draft.current_total_value,
            notes=draft.notes,
        )
        self._state.transactions = [transaction, *self._state.transactions]
        for index, asset in enumerate(self._state.assets):
            if asset.id == transaction.asset_id:
                self._state.assets[index] = apply_to_asset(asset, transaction)
                break
        return transaction

    def _validate_draft(self, draft: TransactionDraft) -> None:
        if not is_known_transaction_type(draft.type):
            raise InvalidTransactionError(
                f"Unknown transaction type {draft.type!r}"
            )
        if draft.type == TRANSACTION_MOVE:
            if not is_transfer_allowed(draft.from_asset_id, draft.asset_id):
                raise InvalidTransactionError(
                    "A move needs a source asset different from its "
                    "destination"
                )
            self._require_asset(draft.from_asset_id)
        self._require_asset(draft.asset_id)

    def _require_asset(self, asset_id: str | None) -> None:
        if self._state.find_asset(asset_id) is None:
            raise InvalidTransactionError(f"Unknown asset {asset_id!r}")

    @staticmethod
    def _normalize_draft(draft: TransactionDraft) -> TransactionDraft:
        try:
            return replace(
                draft,
                date=parse_transaction_date(draft.date),
                amount=coerce_decimal(draft.amount),
                quantity=coerce_decimal(draft.quantity),
                current_total_value=coerce_optional_decimal(
                    draft.current_total_value
                ),
                notes=draft.notes or "",
            )
        except ValueError as exc:
            raise InvalidTransactionError(str(exc)) from exc

    @staticmethod
    def _merge(
        existing: Transaction,
        patch: TransactionPatch,
    ) -> Transaction:
        try:
            amount = coerce_optional_decimal(patch.amount)
            quantity = coerce_optional_decimal(patch.quantity)
            override = coerce_optional_decimal(patch.current_total_value)
            when = (
                parse_transaction_date(patch.date)
                if patch.date is not None
                else None
            )
        except ValueError as exc:
            raise InvalidTransactionError(str(exc)) from exc

        if (
            existing.current_total_value is not None
            and amount is not None
            and override is None
        ):
            override = amount

        return replace(
            existing,
            asset_id=(
                patch.asset_id
                if patch.asset_id is not None
                else existing.asset_id
            ),
            type=patch.type if patch.type is not None else existing.type,
            date=when if when is not None else existing.date,
            amount=amount if amount is not None else existing.amount,
            quantity=quantity if quantity is not None else existing.quantity,
            from_asset_id=(
                patch.from_asset_id
                if patch.from_asset_id is not None
                else existing.from_asset_id
            ),
            current_total_value=(
                override
                if override is not None
                else existing.current_total_value
            ),
            notes=patch.notes if patch.notes is not None else existing.notes,
        )


__all__ = ["TransactionLedger"]
