"""CLI adapter to export the tracker state as a JSON document.

The document goes to ``NETWORTH_EXPORT_PATH`` when set, otherwise to stdout.
"""

import os
from pathlib import Path

from src.infrastructure.container import build_store
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Export the full state."""
    logger = get_app_logger()
    store = build_store()
    document = store.export_state()

    target = os.getenv("NETWORTH_EXPORT_PATH", "").strip()
    if not target:
        print(document)
        return

    path = Path(target).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding="utf-8")
    except OSError as exc:
        logger.error(f"Could not write export to {path}: {exc}")
        return
    get_usage_logger().info(f"State exported to {path}")
    print(
        f"Exported {len(store.state.assets)} assets and "
        f"{len(store.state.transactions)} transactions to {path}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
