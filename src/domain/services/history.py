"""Domain service building net worth time series."""

from collections.abc import Collection, Iterable, Mapping
from datetime import date
from decimal import Decimal

from src.domain.constants import HISTORY_ALL
from src.domain.models.assets import Asset, AssetPosition
from src.domain.models.finance import HistorySeries
from src.domain.models.transactions import Transaction
from src.domain.services.normalization import date_key
from src.domain.services.replay import apply_transaction, sort_chronologically

HistorySelection = str | Collection[str]


def compute_history(
    assets: Iterable[Asset],
    transactions: Iterable[Transaction],
    selection: HistorySelection = HISTORY_ALL,
    *,
    today: date,
) -> HistorySeries:
    """Replay the ledger and record the aggregate value per calendar day.

    Every registered asset is replayed whatever the selection, so totals for
    "all", a single asset, and a subset stay consistent with each other. The
    last value computed on a given day wins. When today has no entry, one is
    appended from the live cached asset values.

    Args:
        assets: Registered assets with their cached state.
        transactions: Stored transactions in any order.
        selection: ``"all"``, a single asset id, or a collection of ids.
        today: Calendar date used for the trailing point.

    Returns:
        HistorySeries: Parallel labels and values in chronological order.
    """
    asset_list = list(assets)
    selected_ids = _resolve_selection(asset_list, selection)
    positions = {asset.id: AssetPosition() for asset in asset_list}
    timeline: dict[str, Decimal] = {}

    for transaction in sort_chronologically(transactions):
        position = positions.get(transaction.asset_id)
        if position is None:
            continue
        positions[transaction.asset_id] = apply_transaction(
            position,
            transaction,
        )
        timeline[date_key(transaction.date)] = _aggregate_positions(
            positions,
            selected_ids,
        )

    today_key = today.isoformat()
    if today_key not in timeline:
        timeline[today_key] = sum(
            (
                asset.current_value
                for asset in asset_list
                if asset.id in selected_ids
            ),
            Decimal("0"),
        )

    return HistorySeries(
        labels=list(timeline.keys()),
        values=list(timeline.values()),
    )


def _resolve_selection(
    assets: list[Asset],
    selection: HistorySelection,
) -> set[str]:
    if isinstance(selection, str):
        if selection == HISTORY_ALL:
            return {asset.id for asset in assets}
        return {selection}
    return set(selection)


def _aggregate_positions(
    positions: Mapping[str, AssetPosition],
    selected_ids: set[str],
) -> Decimal:
    return sum(
        (
            position.value
            for asset_id, position in positions.items()
            if asset_id in selected_ids
        ),
        Decimal("0"),
    )


__all__ = ["HistorySelection", "compute_history"]
