"""Tests for the export_state_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import export_state_cli


def _patch(monkeypatch, document: str = '{"assets": []}') -> MagicMock:
    fake_store = MagicMock()
    fake_store.export_state.return_value = document
    fake_store.state = SimpleNamespace(assets=[1, 2], transactions=[1])
    monkeypatch.setattr(export_state_cli, "build_store", lambda: fake_store)
    monkeypatch.setattr(export_state_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(export_state_cli, "get_usage_logger", MagicMock)
    return fake_store


def test_main_prints_document_without_target(monkeypatch, capsys):
    """Without NETWORTH_EXPORT_PATH the JSON goes to stdout."""
    _patch(monkeypatch)
    monkeypatch.delenv("NETWORTH_EXPORT_PATH", raising=False)

    export_state_cli.main()

    assert capsys.readouterr().out.strip() == '{"assets": []}'


def test_main_writes_target_file(monkeypatch, capsys, tmp_path):
    """The document should be written to the configured path."""
    _patch(monkeypatch)
    target = tmp_path / "exports" / "state.json"
    monkeypatch.setenv("NETWORTH_EXPORT_PATH", str(target))

    export_state_cli.main()

    assert target.read_text(encoding="utf-8") == '{"assets": []}'
    captured = capsys.readouterr()
    assert "2 assets" in captured.out
    assert "1 transactions" in captured.out
