"""Domain normalization helpers."""

from datetime import date, datetime, timezone

from src.domain.constants import DEFAULT_CATEGORY
from src.domain.models.transactions import TransactionDate


def parse_transaction_date(value) -> TransactionDate:
    """Normalize a transaction date value.

    Args:
        value: ISO date or date-time string, or a date/datetime instance.

    Returns:
        TransactionDate: A date for date-only input, otherwise a datetime.

    Raises:
        ValueError: If the value is not a recognizable ISO date.
    """
    if isinstance(value, (date, datetime)):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid transaction date: {value!r}")
    cleaned = value.strip()
    if len(cleaned) == 10:
        return date.fromisoformat(cleaned)
    return datetime.fromisoformat(cleaned)


def parse_timestamp(value) -> datetime:
    """Normalize a record timestamp.

    Args:
        value: ISO date-time string, epoch milliseconds, or datetime.

    Returns:
        datetime: Parsed timestamp.

    Raises:
        ValueError: If the value cannot be read as a timestamp.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str) and value.strip():
        return datetime.fromisoformat(value.strip())
    raise ValueError(f"Invalid timestamp: {value!r}")


def date_sort_key(value: TransactionDate) -> datetime:
    """Return a comparable naive datetime for ordering transactions.

    Date-only values sort at midnight; aware values are compared in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def date_key(value: TransactionDate) -> str:
    """Return the ISO calendar day a transaction belongs to."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    return value.isoformat()


def normalize_category(category: str | None) -> str:
    """Normalize a free-text category for grouping.

    Args:
        category: Raw category label.

    Returns:
        str: Trimmed label, or the default category when blank.
    """
    if not category:
        return DEFAULT_CATEGORY
    cleaned = category.strip()
    return cleaned or DEFAULT_CATEGORY


__all__ = [
    "parse_transaction_date",
    "parse_timestamp",
    "date_sort_key",
    "date_key",
    "normalize_category",
]
