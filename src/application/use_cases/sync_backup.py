"""Use case keeping the local state and the remote backup in step.

Conflicts are resolved per whole snapshot: whichever side was modified last
wins. A remote backup newer than the last local sync replaces the local
state exactly like an import; otherwise the local state is uploaded.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from src.application.ports.backup_transport import (
    BackupResult,
    BackupTransportPort,
)
from src.application.ports.state_storage import StateStoragePort, StorageError
from src.application.services.store import NetWorthStore
from src.domain.models import ImportResult
from src.infrastructure.logging.logger import get_app_logger

LAST_SYNC_KEY = "net_worth_tracker_last_sync"
NO_BACKUP_REASON = "no_backup"

SYNC_RESTORED = "restored"
SYNC_BACKED_UP = "backed_up"
SYNC_FAILED = "failed"

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass(frozen=True)
class SyncBackupResult:
    """Outcome of a sync run.

    Attributes:
        action: restored, backed_up, or failed.
        error: Failure reason when the run failed.
    """

    action: str
    error: str | None = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SyncBackupUseCase:
    """Back up, restore, or reconcile the state with a remote snapshot."""

    def __init__(
        self,
        store: NetWorthStore,
        transport: BackupTransportPort,
        storage: StateStoragePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
        sync_key: str = LAST_SYNC_KEY,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store whose state is backed up or replaced.
            transport: Remote snapshot storage.
            storage: Local storage keeping the last sync time.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional provider of the current time.
            sync_key: Storage key of the last sync time.
        """
        self._store = store
        self._transport = transport
        self._storage = storage
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now
        self._sync_key = sync_key

    def backup(self) -> BackupResult:
        """Upload the current state."""
        result = self._transport.backup(self._store.export_payload())
        if result.success:
            self._mark_synced()
            self._logger.info(
                f"Backup uploaded (updated existing: {result.updated})"
            )
        else:
            self._logger.error(f"Backup failed: {result.error}")
        return result

    def restore(self) -> ImportResult:
        """Replace the local state with the remote snapshot."""
        remote = self._transport.restore()
        if not remote.success:
            self._logger.error(f"Restore failed: {remote.error}")
            return ImportResult(success=False, error=remote.error)
        if not remote.found:
            return ImportResult(success=False, error=NO_BACKUP_REASON)
        imported = self._store.import_payload(remote.payload)
        if imported.success:
            self._mark_synced()
        return imported

    def execute(self) -> SyncBackupResult:
        """Pull the remote snapshot when newer, otherwise push local state.

        Returns:
            SyncBackupResult: What the run did.
        """
        remote = self._transport.restore()
        if not remote.success:
            self._logger.error(f"Sync failed: {remote.error}")
            return SyncBackupResult(action=SYNC_FAILED, error=remote.error)

        if remote.found and remote.modified_time is not None:
            last_sync = self._last_synced()
            if _as_utc(remote.modified_time) > last_sync:
                imported = self._store.import_payload(remote.payload)
                if imported.success:
                    self._mark_synced()
                    self._logger.info(
                        f"Restored remote backup from {remote.modified_time}"
                    )
                    return SyncBackupResult(action=SYNC_RESTORED)
                self._logger.warning(
                    f"Remote backup rejected: {imported.error}"
                )

        uploaded = self.backup()
        if not uploaded.success:
            return SyncBackupResult(action=SYNC_FAILED, error=uploaded.error)
        return SyncBackupResult(action=SYNC_BACKED_UP)

    def _last_synced(self) -> datetime:
        try:
            raw = self._storage.get(self._sync_key)
        except StorageError as exc:
            self._logger.warning(f"Could not read last sync time: {exc}")
            return _EPOCH
        if not raw:
            return _EPOCH
        try:
            return _as_utc(datetime.fromisoformat(raw))
        except ValueError:
            self._logger.warning(f"Ignoring invalid last sync time {raw!r}")
            return _EPOCH

    def _mark_synced(self) -> None:
        try:
            self._storage.set(self._sync_key, self._clock().isoformat())
        except StorageError as exc:
            self._logger.error(f"Could not record sync time: {exc}")


__all__ = [
    "LAST_SYNC_KEY",
    "NO_BACKUP_REASON",
    "SYNC_RESTORED",
    "SYNC_BACKED_UP",
    "SYNC_FAILED",
    "SyncBackupResult",
    "SyncBackupUseCase",
]
