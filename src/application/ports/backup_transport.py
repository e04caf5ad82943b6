"""Port for uploading and downloading whole-state backups."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol


@dataclass(frozen=True)
class BackupResult:
    """Outcome of a backup upload.

    Attributes:
        success: Whether the snapshot was stored remotely.
        updated: True when an existing backup was overwritten.
        error: Failure reason when unsuccessful.
    """

    success: bool
    updated: bool = False
    error: str | None = None


@dataclass(frozen=True)
class RestoreResult:
    """Outcome of a backup download.

    Attributes:
        success: False when the transport itself failed.
        found: Whether a backup exists remotely.
        payload: Decoded state document when found.
        modified_time: Last modification of the remote backup.
        error: Failure reason when unsuccessful.
    """

    success: bool
    found: bool = False
    payload: dict[str, Any] | None = None
    modified_time: datetime | None = None
    error: str | None = None


class BackupTransportPort(Protocol):
    """Port exposing remote storage for state snapshots."""

    def backup(self, payload: dict[str, Any]) -> BackupResult:
        """Upload a state snapshot, replacing the remote backup."""

    def restore(self) -> RestoreResult:
        """Download the remote snapshot, if any."""


__all__ = ["BackupResult", "RestoreResult", "BackupTransportPort"]
