"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from src.application.services.store import DEFAULT_STORAGE_KEY
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class TrackerSettings:
    """Settings for storage and backup adapters.

    Attributes:
        database_url: SQLAlchemy URL of the state database.
        backup_dir: Optional directory receiving backup snapshots.
        storage_key: Key holding the serialized state.
    """

    database_url: str
    backup_dir: Optional[Path] = None
    storage_key: str = DEFAULT_STORAGE_KEY

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        database_url = (
            os.getenv("NETWORTH_DB_URL", "").strip()
            or cls._default_database_url()
        )
        raw_backup = os.getenv("NETWORTH_BACKUP_DIR")
        backup_dir = None
        if raw_backup and raw_backup.strip():
            backup_dir = cls._normalize_path(raw_backup.strip(), logger=logger)
        storage_key = (
            os.getenv("NETWORTH_STORAGE_KEY", "").strip() or DEFAULT_STORAGE_KEY
        )
        return cls(
            database_url=database_url,
            backup_dir=backup_dir,
            storage_key=storage_key,
        )

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path | None:
        """Normalize the backup directory path or ``file://`` URI.

        Args:
            raw_path: Raw path string.
            logger: Logger used for warnings.

        Returns:
            Path | None: Resolved directory, or None for unsupported URIs.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme and parsed.scheme != "file" and len(parsed.scheme) > 1:
            logger.warning(
                f"Unsupported backup location {raw_path}; "
                "only local directories are handled"
            )
            return None
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(
                f"Backup directory does not exist at {path}; "
                "it will be created on first backup"
            )
        return path

    @staticmethod
    def _default_database_url() -> str:
        """Return the SQLite file used when no URL is configured."""
        return f"sqlite:///{get_project_root() / 'data' / 'networth.db'}"


__all__ = ["TrackerSettings"]
