"""Application ports package."""

from .backup_transport import BackupResult, BackupTransportPort, RestoreResult
from .database import DatabaseEnginePort
from .state_storage import StateStoragePort, StorageError

__all__ = [
    "BackupResult",
    "BackupTransportPort",
    "RestoreResult",
    "DatabaseEnginePort",
    "StateStoragePort",
    "StorageError",
]
