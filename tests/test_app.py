"""Tests for the application entry point."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from checkie import app


def _captured_basic_config(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    captured: dict[str, Any] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    return captured


def test_log_level_defaults_to_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHECKIE_LOG_LEVEL", raising=False)
    captured = _captured_basic_config(monkeypatch)
    app.configure_logging()
    assert captured["level"] == logging.WARNING


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHECKIE_LOG_LEVEL", "debug")
    captured = _captured_basic_config(monkeypatch)
    app.configure_logging()
    assert captured["level"] == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHECKIE_LOG_LEVEL", "chatty")
    captured = _captured_basic_config(monkeypatch)
    app.configure_logging()
    assert captured["level"] == logging.WARNING


def test_main_exits_with_application_code(monkeypatch: pytest.MonkeyPatch) -> None:
    _captured_basic_config(monkeypatch)
    monkeypatch.setattr("checkie.ui.bootstrap.run_application", lambda: 3)
    with pytest.raises(SystemExit) as exc_info:
        app.main()
    assert exc_info.value.code == 3
