"""JSON codec for the tracker state.

Documents use camelCase keys (``assetId``, ``currentValue``...) so exports
stay readable by other tools working with the same backup format.
"""

import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from src.domain.errors import StatePayloadError
from src.domain.models import Asset, Settings, StoreState, Transaction
from src.domain.services.normalization import (
    parse_timestamp,
    parse_transaction_date,
)
from src.domain.constants import SOURCE_MANUAL
from src.utils.decimal_utils import (
    coerce_decimal,
    coerce_optional_decimal,
    decimal_to_json,
)

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def state_to_payload(state: StoreState) -> dict[str, Any]:
    """Return a JSON-ready mapping of the full state."""
    return {
        "assets": [_asset_to_payload(asset) for asset in state.assets],
        "transactions": [
            _transaction_to_payload(transaction)
            for transaction in state.transactions
        ],
        "settings": _settings_to_payload(state.settings),
    }


def state_from_payload(payload: dict[str, Any]) -> StoreState:
    """Build a state from a decoded document, merged over defaults.

    Missing collections become empty and missing settings fields fall back to
    their defaults.

    Args:
        payload: Decoded JSON document.

    Returns:
        StoreState: State built from the document.

    Raises:
        StatePayloadError: If a record cannot be converted.
    """
    try:
        assets = [
            _asset_from_payload(item) for item in payload.get("assets") or []
        ]
        transactions = [
            _transaction_from_payload(item)
            for item in payload.get("transactions") or []
        ]
        settings = _settings_from_payload(payload.get("settings") or {})
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise StatePayloadError(f"Invalid record: {exc}") from exc
    return StoreState(
        assets=assets,
        transactions=transactions,
        settings=settings,
    )


def dump_state(state: StoreState) -> str:
    """Serialize the state as pretty-printed JSON."""
    return json.dumps(state_to_payload(state), indent=2, ensure_ascii=False)


def decode_state_document(document: str) -> Any:
    """Decode a JSON document, keeping fractional numbers as Decimal.

    Raises:
        StatePayloadError: If the document is not valid JSON.
    """
    try:
        return json.loads(document, parse_float=Decimal)
    except (json.JSONDecodeError, TypeError) as exc:
        raise StatePayloadError(f"Invalid JSON: {exc}") from exc


def _asset_to_payload(asset: Asset) -> dict[str, Any]:
    return {
        "id": asset.id,
        "name": asset.name,
        "category": asset.category,
        "type": asset.source_type,
        "quantity": decimal_to_json(asset.quantity),
        "currentValue": decimal_to_json(asset.current_value),
    }


def _asset_from_payload(item: dict[str, Any]) -> Asset:
    return Asset(
        id=str(item["id"]),
        name=str(item.get("name") or ""),
        category=str(item.get("category") or ""),
        quantity=coerce_decimal(item.get("quantity")),
        current_value=coerce_decimal(item.get("currentValue")),
        source_type=str(item.get("type") or SOURCE_MANUAL),
    )


def _transaction_to_payload(transaction: Transaction) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": transaction.id,
        "timestamp": transaction.timestamp.isoformat(),
        "assetId": transaction.asset_id,
        "type": transaction.type,
        "date": transaction.date.isoformat(),
        "amount": decimal_to_json(transaction.amount),
        "quantity": decimal_to_json(transaction.quantity),
        "notes": transaction.notes,
    }
    if transaction.from_asset_id is not None:
        payload["fromAssetId"] = transaction.from_asset_id
    if transaction.current_total_value is not None:
        payload["currentTotalValue"] = decimal_to_json(
            transaction.current_total_value
        )
    return payload


def _transaction_from_payload(item: dict[str, Any]) -> Transaction:
    raw_timestamp = item.get("timestamp")
    from_asset_id = item.get("fromAssetId")
    return Transaction(
        id=str(item["id"]),
        timestamp=(
            parse_timestamp(raw_timestamp)
            if raw_timestamp is not None
            else _EPOCH
        ),
        asset_id=str(item["assetId"]),
        type=str(item["type"]),
        date=parse_transaction_date(item["date"]),
        amount=coerce_decimal(item.get("amount")),
        quantity=coerce_decimal(item.get("quantity")),
        from_asset_id=str(from_asset_id) if from_asset_id else None,
        current_total_value=coerce_optional_decimal(
            item.get("currentTotalValue")
        ),
        notes=str(item.get("notes") or ""),
    )


def _settings_to_payload(settings: Settings) -> dict[str, Any]:
    return {
        "currency": settings.currency,
        "theme": settings.theme,
        "providerKey": settings.provider_key,
        "lastPriceUpdate": (
            settings.last_price_update.isoformat()
            if settings.last_price_update
            else None
        ),
    }


def _settings_from_payload(item: dict[str, Any]) -> Settings:
    defaults = Settings()
    raw_update = item.get("lastPriceUpdate")
    return Settings(
        currency=str(item.get("currency") or defaults.currency),
        theme=str(item.get("theme") or defaults.theme),
        provider_key=str(item.get("providerKey") or defaults.provider_key),
        last_price_update=(
            parse_timestamp(raw_update) if raw_update else None
        ),
    )


__all__ = [
    "state_to_payload",
    "state_from_payload",
    "dump_state",
    "decode_state_document",
]
