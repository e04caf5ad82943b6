"""Composition root for wiring infrastructure adapters."""

from src.application.ports.backup_transport import BackupTransportPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.state_storage import StateStoragePort
from src.application.services.store import NetWorthStore, load_store_state
from src.application.use_cases.sync_backup import SyncBackupUseCase
from src.infrastructure.backup_transport import DirectoryBackupTransport
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import TrackerSettings
from src.infrastructure.state_storage import SqlAlchemyStateStorage


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_state_storage(
    db_port: DatabaseEnginePort | None = None,
) -> StateStoragePort:
    """Return the durable state storage."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyStateStorage(resolved_db)


def build_backup_transport(
    settings: TrackerSettings | None = None,
) -> BackupTransportPort:
    """Return the configured backup transport."""
    resolved = settings or TrackerSettings.from_env()
    if resolved.backup_dir is None:
        raise RuntimeError(
            "Backups require a NETWORTH_BACKUP_DIR value."
        )
    return DirectoryBackupTransport(
        resolved.backup_dir,
        logger=get_app_logger(),
    )


def build_store(
    storage: StateStoragePort | None = None,
    settings: TrackerSettings | None = None,
) -> NetWorthStore:
    """Return a store loaded from durable storage."""
    resolved = settings or TrackerSettings.from_env()
    resolved_storage = storage or build_state_storage()
    logger = get_app_logger()
    state = load_store_state(
        resolved_storage,
        key=resolved.storage_key,
        logger=logger,
    )
    return NetWorthStore(
        state,
        resolved_storage,
        logger=logger,
        storage_key=resolved.storage_key,
    )


def build_sync_backup_use_case(
    store: NetWorthStore,
    storage: StateStoragePort,
    settings: TrackerSettings | None = None,
) -> SyncBackupUseCase:
    """Return the backup sync use case for a store."""
    return SyncBackupUseCase(
        store,
        build_backup_transport(settings),
        storage,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_state_storage",
    "build_backup_transport",
    "build_store",
    "build_sync_backup_use_case",
]
