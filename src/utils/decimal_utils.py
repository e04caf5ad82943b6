"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        result = value
    elif value is None or value == "":
        return Decimal("0")
    elif isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a numeric value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite value: {value!r}")
    return result


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize a numeric value, keeping None as None."""
    if value is None:
        return None
    return coerce_decimal(value)


def decimal_to_json(value: Decimal) -> int | float | str:
    """Return a JSON value that decodes back to the same Decimal.

    Integral values become ints and values a float carries exactly become
    floats. Anything more precise is kept as its decimal text, which
    ``coerce_decimal`` reads back unchanged.
    """
    if value == value.to_integral_value():
        return int(value)
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


__all__ = ["coerce_decimal", "coerce_optional_decimal", "decimal_to_json"]
