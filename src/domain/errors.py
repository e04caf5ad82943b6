"""Domain error types."""


class TrackerError(Exception):
    """Base error for the net worth tracker."""


class InvalidAssetError(TrackerError, ValueError):
    """Raised when an asset definition breaks a registry rule."""


class InvalidTransactionError(TrackerError, ValueError):
    """Raised when a transaction cannot be recorded as given."""


class StatePayloadError(TrackerError, ValueError):
    """Raised when a serialized state cannot be turned into models."""


__all__ = [
    "TrackerError",
    "InvalidAssetError",
    "InvalidTransactionError",
    "StatePayloadError",
]
