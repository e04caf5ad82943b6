"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import container
from src.infrastructure.backup_transport import DirectoryBackupTransport
from src.infrastructure.settings import TrackerSettings
from src.infrastructure.state_storage import (
    InMemoryStateStorage,
    SqlAlchemyStateStorage,
)


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())


def test_build_state_storage_uses_database_port() -> None:
    db_port = MagicMock()

    storage = container.build_state_storage(db_port)

    assert isinstance(storage, SqlAlchemyStateStorage)
    assert storage._db_port is db_port


def test_build_backup_transport_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        container.build_backup_transport(
            TrackerSettings(database_url="sqlite://")
        )

    transport = container.build_backup_transport(
        TrackerSettings(database_url="sqlite://", backup_dir=tmp_path)
    )
    assert isinstance(transport, DirectoryBackupTransport)
    assert transport.path.parent == tmp_path


def test_build_store_loads_stored_state() -> None:
    storage = InMemoryStateStorage(
        {"key": '{"assets": [{"id": "a", "name": "A"}], "transactions": []}'}
    )
    settings = TrackerSettings(database_url="sqlite://", storage_key="key")

    store = container.build_store(storage=storage, settings=settings)

    assert [asset.id for asset in store.state.assets] == ["a"]
    store.recalculate()
    assert '"id": "a"' in storage.get("key")
