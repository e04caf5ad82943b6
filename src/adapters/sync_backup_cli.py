"""CLI adapter to reconcile the local state with the backup directory."""

from src.infrastructure.container import (
    build_state_storage,
    build_store,
    build_sync_backup_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import TrackerSettings


def main() -> None:
    """Run the backup sync use case."""
    logger = get_app_logger()
    settings = TrackerSettings.from_env()
    if settings.backup_dir is None:
        logger.warning("NETWORTH_BACKUP_DIR is required to sync backups.")
        return

    storage = build_state_storage()
    store = build_store(storage=storage, settings=settings)
    use_case = build_sync_backup_use_case(store, storage, settings=settings)
    result = use_case.execute()

    get_usage_logger().info(f"Backup sync finished: {result.action}")
    if result.error:
        print(f"Backup sync {result.action}: {result.error}")
        return
    print(
        f"Backup sync {result.action} "
        f"({len(store.state.assets)} assets, "
        f"{len(store.state.transactions)} transactions)."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
