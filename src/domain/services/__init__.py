"""Domain services package."""

from .finance import (
    compute_asset_category_breakdown,
    compute_cost_basis,
    compute_monthly_trend,
    compute_net_worth_summary,
    filter_transactions,
    held_assets,
    total_net_worth,
)
from .history import compute_history
from .normalization import (
    date_key,
    date_sort_key,
    normalize_category,
    parse_timestamp,
    parse_transaction_date,
)
from .replay import (
    apply_to_asset,
    apply_transaction,
    expand_move,
    initial_balance_draft,
    replay_assets,
    sort_chronologically,
)
from .serialization import (
    decode_state_document,
    dump_state,
    state_from_payload,
    state_to_payload,
)
from .validation import validate_state_payload

__all__ = [
    "compute_asset_category_breakdown",
    "compute_cost_basis",
    "compute_monthly_trend",
    "compute_net_worth_summary",
    "filter_transactions",
    "held_assets",
    "total_net_worth",
    "compute_history",
    "date_key",
    "date_sort_key",
    "normalize_category",
    "parse_timestamp",
    "parse_transaction_date",
    "apply_to_asset",
    "apply_transaction",
    "expand_move",
    "initial_balance_draft",
    "replay_assets",
    "sort_chronologically",
    "decode_state_document",
    "dump_state",
    "state_from_payload",
    "state_to_payload",
    "validate_state_payload",
]
