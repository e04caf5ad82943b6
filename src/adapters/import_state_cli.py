"""CLI adapter to replace the tracker state from a JSON document."""

import os
from pathlib import Path

from src.infrastructure.container import build_store
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Import the document named by ``NETWORTH_IMPORT_PATH``."""
    logger = get_app_logger()
    source = os.getenv("NETWORTH_IMPORT_PATH", "").strip()
    if not source:
        logger.warning("NETWORTH_IMPORT_PATH is required to import a state.")
        return

    path = Path(source).expanduser()
    try:
        document = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error(f"Could not read import file {path}: {exc}")
        return

    store = build_store()
    result = store.import_state(document)
    if not result.success:
        print(f"Import failed: {result.error}")
        return
    get_usage_logger().info(f"State imported from {path}")
    print(
        f"Imported {len(store.state.assets)} assets and "
        f"{len(store.state.transactions)} transactions from {path}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
