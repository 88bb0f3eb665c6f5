# tests/test_main.py

from __future__ import annotations

import logging

import pytest

from todo_keeper.cli import main as main_module


def test_main_exits_1_on_corrupt_storage(
    settings, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    settings.storage_path.write_text("{not json", "utf-8")
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: None)

    with caplog.at_level(logging.ERROR):
        assert main_module.main() == 1

    assert "Cannot load saved tasks" in caplog.text
    # corrupt data is left for the user to inspect
    assert settings.storage_path.read_text("utf-8") == "{not json"


def test_main_without_console_returns_0(settings, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: None)

    assert main_module.main() == 0
