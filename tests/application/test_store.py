"""Tests for the NetWorthStore facade."""

import json
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.state_storage import StorageError
from src.application.services.store import NetWorthStore, load_store_state
from src.domain.errors import InvalidTransactionError
from src.domain.models import (
    AssetDraft,
    AssetPatch,
    SettingsPatch,
    StoreState,
    TransactionDraft,
    TransactionPatch,
)
from src.domain.services import replay_assets

_TODAY = date(2024, 6, 15)
_NOW = datetime(2024, 6, 15, 8, 0, tzinfo=timezone.utc)


class _FakeStorage:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.values[key] = value


class _FailingStorage:
    def get(self, key: str) -> str | None:
        raise StorageError("disk on fire")

    def set(self, key: str, value: str) -> None:
        raise StorageError("disk on fire")


def _store(storage=None, state=None) -> NetWorthStore:
    return NetWorthStore(
        state or StoreState(),
        storage or _FakeStorage(),
        logger=MagicMock(),
        today=lambda: _TODAY,
        clock=lambda: _NOW,
    )


def _buy(asset_id, when, amount, quantity="0", **kwargs) -> TransactionDraft:
    return TransactionDraft(
        asset_id=asset_id,
        type=kwargs.pop("tx_type", "buy"),
        date=when,
        amount=Decimal(amount),
        quantity=Decimal(quantity),
        **kwargs,
    )


def test_worked_scenario_buy_then_sell() -> None:
    """Initial buy of 1000 for 10 units then a sell of 400 for 4 units."""
    store = _store()
    asset = store.add_asset(AssetDraft(name="A"))
    store.add_transaction(_buy(asset.id, "2024-01-01", "1000", "10"))
    store.add_transaction(
        _buy(asset.id, "2024-02-01", "400", "4", tx_type="sell")
    )

    current = store.state.find_asset(asset.id)
    history = dict(store.get_history("all").points())

    assert current.quantity == Decimal("6")
    assert current.current_value == Decimal("600")
    assert history == {
        "2024-01-01": Decimal("1000"),
        "2024-02-01": Decimal("600"),
        "2024-06-15": Decimal("600"),
    }


def test_add_asset_with_initial_balance_records_override() -> None:
    store = _store()

    asset = store.add_asset_with_initial_balance(
        AssetDraft(name="House", category="Property"),
        initial_value="250000",
        initial_quantity="1",
        when="2024-01-01",
    )
    empty = store.add_asset_with_initial_balance(AssetDraft(name="Empty"))

    assert asset.current_value == Decimal("250000")
    assert asset.quantity == Decimal("1")
    assert len(store.state.transactions) == 1
    opening = store.state.transactions[0]
    assert opening.notes == "Initial Balance"
    assert opening.current_total_value == Decimal("250000")
    assert empty.current_value == Decimal("0")


def test_every_mutation_notifies_and_persists() -> None:
    storage = _FakeStorage()
    store = _store(storage)
    seen = []
    token = store.subscribe(lambda state: seen.append(len(state.transactions)))

    asset = store.add_asset(AssetDraft(name="Cash"))
    [tx] = store.add_transaction(_buy(asset.id, "2024-01-01", "10"))
    store.edit_transaction(tx.id, TransactionPatch(notes="salary"))
    store.edit_asset(asset.id, AssetPatch(category="Bank"))
    store.edit_settings(SettingsPatch(currency="USD"))
    store.delete_transaction(tx.id)
    store.recalculate()

    assert seen == [0, 1, 1, 1, 1, 0, 0]
    assert storage.writes == 7
    assert store.unsubscribe(token) is True
    assert store.unsubscribe(token) is False
    store.delete_asset(asset.id)
    assert len(seen) == 7
    saved = json.loads(storage.values["net_worth_tracker_v1"])
    assert saved["assets"] == []
    assert saved["settings"]["currency"] == "USD"


def test_noop_edits_and_deletes_do_not_notify() -> None:
    storage = _FakeStorage()
    store = _store(storage)
    listener = MagicMock()
    store.subscribe(listener)

    assert store.edit_asset("missing", AssetPatch(name="x")) is False
    assert store.delete_asset("missing") is False
    assert store.edit_transaction("missing", TransactionPatch()) is False
    assert store.delete_transaction("missing") is False

    listener.assert_not_called()
    assert storage.writes == 0


def test_rejected_transaction_leaves_state_untouched() -> None:
    storage = _FakeStorage()
    store = _store(storage)
    asset = store.add_asset(AssetDraft(name="Cash"))
    writes = storage.writes

    with pytest.raises(InvalidTransactionError):
        store.add_transaction(
            _buy(asset.id, "2024-01-01", "10", tx_type="move")
        )

    assert store.state.transactions == []
    assert storage.writes == writes


def test_rejected_opening_balance_leaves_no_asset() -> None:
    storage = _FakeStorage()
    store = _store(storage)
    listener = MagicMock()
    store.subscribe(listener)

    with pytest.raises(InvalidTransactionError):
        store.add_asset_with_initial_balance(
            AssetDraft(name="House"),
            initial_value="1000",
            when="not-a-date",
        )
    with pytest.raises(InvalidTransactionError):
        store.add_asset_with_initial_balance(
            AssetDraft(name="House"),
            initial_value="a lot",
        )

    assert store.state.assets == []
    assert store.state.transactions == []
    listener.assert_not_called()
    assert storage.writes == 0


def test_opening_balance_defaults_to_local_today() -> None:
    """The opening date comes from the calendar day, not the UTC clock."""
    store = NetWorthStore(
        StoreState(),
        _FakeStorage(),
        logger=MagicMock(),
        today=lambda: date(2024, 6, 16),
        clock=lambda: datetime(2024, 6, 15, 23, 30, tzinfo=timezone.utc),
    )

    asset = store.add_asset_with_initial_balance(
        AssetDraft(name="Cash"),
        initial_value="500",
    )

    assert store.state.transactions[0].date == date(2024, 6, 16)
    assert store.get_history(asset.id).points() == [
        ("2024-06-16", Decimal("500")),
    ]


def test_failing_listener_does_not_block_persistence() -> None:
    storage = _FakeStorage()
    store = _store(storage)

    def broken(_state):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.add_asset(AssetDraft(name="Cash"))

    assert storage.writes == 1
    store._logger.error.assert_called()


def test_storage_failure_keeps_in_memory_change() -> None:
    store = _store(_FailingStorage())

    asset = store.add_asset(AssetDraft(name="Cash"))

    assert store.state.find_asset(asset.id) is not None
    store._logger.error.assert_called()


def test_move_then_delete_source_cascades() -> None:
    store = _store()
    a = store.add_asset(AssetDraft(name="A"))
    b = store.add_asset(AssetDraft(name="B"))
    c = store.add_asset(AssetDraft(name="C"))
    store.add_transaction(_buy(a.id, "2024-01-01", "1000"))
    store.add_transaction(_buy(c.id, "2024-01-01", "5"))
    store.add_transaction(
        _buy(b.id, "2024-02-01", "300", tx_type="move", from_asset_id=a.id)
    )

    assert store.state.find_asset(b.id).current_value == Decimal("300")
    assert store.delete_asset(a.id) is True

    remaining = {tx.asset_id for tx in store.state.transactions}
    assert a.id not in remaining
    assert remaining == {b.id, c.id}


def test_update_sets_absolute_value_after_buy() -> None:
    store = _store()
    asset = store.add_asset(AssetDraft(name="Fund"))
    store.add_transaction(_buy(asset.id, "2024-01-01", "100", "2"))
    store.add_transaction(
        _buy(asset.id, "2024-01-02", "180", tx_type="update")
    )

    current = store.state.find_asset(asset.id)
    assert current.current_value == Decimal("180")
    assert current.quantity == Decimal("2")


def test_cached_state_matches_replay_after_edits() -> None:
    store = _store()
    a = store.add_asset(AssetDraft(name="A"))
    b = store.add_asset(AssetDraft(name="B"))
    [first] = store.add_transaction(_buy(a.id, "2024-03-01", "100", "1"))
    store.add_transaction(_buy(a.id, "2024-01-01", "50", "1"))
    store.add_transaction(
        _buy(b.id, "2024-02-01", "20", tx_type="move", from_asset_id=a.id)
    )
    store.edit_transaction(first.id, TransactionPatch(date="2023-12-01"))

    expected = replay_assets(store.state.assets, store.state.transactions)
    assert store.state.assets == expected

    store.recalculate()
    assert store.state.assets == expected


def test_empty_history_is_single_today_point() -> None:
    store = _store()

    history = store.get_history()

    assert history.labels == ["2024-06-15"]
    assert history.values == [Decimal("0")]


def test_history_for_assets_sums_subset() -> None:
    store = _store()
    a = store.add_asset(AssetDraft(name="A"))
    b = store.add_asset(AssetDraft(name="B"))
    store.add_transaction(_buy(a.id, "2024-01-01", "10"))
    store.add_transaction(_buy(b.id, "2024-01-02", "5"))

    both = store.get_history_for_assets([a.id, b.id])
    only_b = store.get_history_for_assets(b.id)

    assert both.values == store.get_history().values
    assert only_b.values == [Decimal("0"), Decimal("5"), Decimal("5")]


def test_queries_cost_basis_filter_and_held() -> None:
    store = _store()
    a = store.add_asset(AssetDraft(name="A"))
    store.add_asset(AssetDraft(name="Empty"))
    store.add_transaction(_buy(a.id, "2024-01-01", "100", notes="first"))
    store.add_transaction(
        _buy(a.id, "2024-02-01", "30", tx_type="sell", notes="Second")
    )

    assert store.total_net_worth == Decimal("70")
    assert store.cost_basis(a.id) == Decimal("70")
    assert [tx.notes for tx in store.filter_transactions(search="SECOND")] == [
        "Second"
    ]
    assert [asset.id for asset in store.held_assets()] == [a.id]


def test_export_import_round_trip() -> None:
    source = _store()
    a = source.add_asset(AssetDraft(name="A", category="Cash"))
    source.add_transaction(_buy(a.id, "2024-01-01", "10.25", "1.5"))
    source.edit_settings(SettingsPatch(theme="light"))

    target = _store()
    state_before = target.state
    result = target.import_state(source.export_state())

    assert result.success is True
    assert target.state is state_before
    assert target.state == source.state


def test_export_import_round_trip_keeps_full_precision() -> None:
    """Values beyond float precision survive export and storage."""
    storage = _FakeStorage()
    source = _store(storage)
    a = source.add_asset(AssetDraft(name="Wallet", category="Crypto"))
    source.add_transaction(
        _buy(
            a.id,
            "2024-01-01",
            "3456.123456789012345678",
            "1.123456789012345678",
        )
    )

    target = _store()
    target.import_state(source.export_state())
    reloaded = load_store_state(storage, logger=MagicMock())

    held = target.state.find_asset(a.id)
    assert held.quantity == Decimal("1.123456789012345678")
    assert held.current_value == Decimal("3456.123456789012345678")
    assert target.state == source.state
    assert reloaded == source.state


def test_import_rejects_invalid_documents() -> None:
    storage = _FakeStorage()
    store = _store(storage)
    store.add_asset(AssetDraft(name="Keep"))
    before = list(store.state.assets)

    bad_json = store.import_state("{oops")
    bad_shape = store.import_state(json.dumps({"assets": []}))

    assert bad_json.success is False
    assert bad_shape.success is False
    assert bad_shape.error == "Invalid data format"
    assert store.state.assets == before
    assert storage.writes == 1


def test_import_does_not_recalculate() -> None:
    store = _store()
    payload = {
        "assets": [{"id": "a", "name": "A", "currentValue": 42}],
        "transactions": [],
    }

    assert store.import_payload(payload).success is True
    assert store.state.find_asset("a").current_value == Decimal("42")


def test_load_store_state_falls_back_to_empty() -> None:
    logger = MagicMock()

    assert load_store_state(_FakeStorage(), logger=logger) == StoreState()
    assert load_store_state(
        _FakeStorage({"net_worth_tracker_v1": "not json"}),
        logger=logger,
    ) == StoreState()
    assert load_store_state(_FailingStorage(), logger=logger) == StoreState()
    assert logger.error.call_count == 2


def test_load_store_state_merges_defaults() -> None:
    stored = json.dumps({"assets": [{"id": "a", "name": "A"}]})

    state = load_store_state(
        _FakeStorage({"custom": stored}),
        key="custom",
        logger=MagicMock(),
    )

    assert [asset.id for asset in state.assets] == ["a"]
    assert state.transactions == []
    assert state.settings.currency == "EUR"
