"""Domain validation helpers."""

INVALID_FORMAT_REASON = "Invalid data format"


def validate_state_payload(payload) -> str | None:
    """Check the minimum shape of a serialized state.

    Only the presence of ``assets`` and ``transactions`` as lists is
    required; any other content is accepted as-is.

    Args:
        payload: Decoded JSON document.

    Returns:
        str | None: Human-readable reason when invalid, otherwise None.
    """
    if not isinstance(payload, dict):
        return INVALID_FORMAT_REASON
    for key in ("assets", "transactions"):
        if not isinstance(payload.get(key), list):
            return INVALID_FORMAT_REASON
    return None


__all__ = ["INVALID_FORMAT_REASON", "validate_state_payload"]
