"""Tests for the infrastructure.db module."""

from types import SimpleNamespace

from src.infrastructure import db as db_module


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://tracker")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://tracker"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_ensure_sqlite_directory_creates_parent(tmp_path):
    """SQLite file URLs should get their parent directory created."""
    db_path = tmp_path / "nested" / "state.db"

    db_module._ensure_sqlite_directory(f"sqlite:///{db_path}")
    db_module._ensure_sqlite_directory("sqlite:///:memory:")
    db_module._ensure_sqlite_directory("postgresql://host/db")

    assert db_path.parent.is_dir()


def test_get_state_engine_caches_engine(monkeypatch):
    """get_state_engine should memoize the created engine."""
    db_module._state_engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(
        db_module.TrackerSettings,
        "from_env",
        classmethod(
            lambda cls: SimpleNamespace(database_url="sqlite:///state.db")
        ),
    )

    engine_one = db_module.get_state_engine()
    engine_two = db_module.get_state_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite:///state.db"
    assert created == ["sqlite:///state.db"]
    db_module._state_engine = None


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(db_module, "get_state_engine", lambda: "state_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_state_engine() == "state_engine"
