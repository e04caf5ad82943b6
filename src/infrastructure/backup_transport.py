"""Backup transport writing snapshots into a local directory.

The directory can be a synced folder (network share, cloud drive client);
its file modification time serves as the remote modification time.
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.application.ports.backup_transport import (
    BackupResult,
    BackupTransportPort,
    RestoreResult,
)
from src.domain.errors import StatePayloadError
from src.domain.services import decode_state_document, validate_state_payload
from src.infrastructure.logging.logger import get_app_logger

BACKUP_FILENAME = "net-worth-tracker-backup.json"


class DirectoryBackupTransport(BackupTransportPort):
    """Backup transport backed by a single JSON file in a directory."""

    def __init__(
        self,
        directory: Path | str,
        logger=None,
        filename: str = BACKUP_FILENAME,
    ) -> None:
        """Initialize the transport.

        Args:
            directory: Directory receiving the backup file.
            logger: Optional logger compatible with logging.Logger-like API.
            filename: Name of the backup file.
        """
        self._path = Path(directory) / filename
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        """Location of the backup file."""
        return self._path

    def backup(self, payload: dict[str, Any]) -> BackupResult:
        """Write the snapshot, replacing any previous backup atomically."""
        content = json.dumps(payload, indent=2, ensure_ascii=False)
        existed = self._path.exists()
        tmp_path = self._path.with_name(f".{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            self._logger.error(f"Error uploading backup to {self._path}: {exc}")
            return BackupResult(success=False, error=str(exc))
        return BackupResult(success=True, updated=existed)

    def restore(self) -> RestoreResult:
        """Read the snapshot and its modification time, if present."""
        if not self._path.exists():
            return RestoreResult(success=True, found=False)
        try:
            content = self._path.read_text(encoding="utf-8")
            modified = self._path.stat().st_mtime
            payload = decode_state_document(content)
        except (OSError, StatePayloadError) as exc:
            self._logger.error(
                f"Error downloading backup from {self._path}: {exc}"
            )
            return RestoreResult(success=False, error=str(exc))
        reason = validate_state_payload(payload)
        if reason is not None:
            return RestoreResult(success=False, error=reason)
        return RestoreResult(
            success=True,
            found=True,
            payload=payload,
            modified_time=datetime.fromtimestamp(modified, tz=timezone.utc),
        )


__all__ = ["BACKUP_FILENAME", "DirectoryBackupTransport"]
