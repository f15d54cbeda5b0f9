"""Tests for configuration and logging setup."""
# ruff: noqa: S101
# pylint: disable=import-error

from __future__ import annotations

import logging

import pytest

from buup.utils.env import Settings, load_settings
from buup.utils.logging import setup_logging


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables fall back to defaults."""
    for key in ("BUUP_LOG_LEVEL", "BUUP_SERVER_NAME", "BUUP_SERVER_PORT"):
        monkeypatch.delenv(key, raising=False)
    assert load_settings() == Settings()


def test_load_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Variables override the defaults."""
    monkeypatch.setenv("BUUP_LOG_LEVEL", "debug")
    monkeypatch.setenv("BUUP_SERVER_NAME", "0.0.0.0")
    monkeypatch.setenv("BUUP_SERVER_PORT", "8080")
    assert load_settings() == Settings(log_level="DEBUG", server_name="0.0.0.0", server_port=8080)


def test_load_settings_bad_port(monkeypatch: pytest.MonkeyPatch) -> None:
    """A non-numeric port is rejected."""
    monkeypatch.setenv("BUUP_SERVER_PORT", "http")
    with pytest.raises(ValueError, match="BUUP_SERVER_PORT must be an integer"):
        load_settings()


def test_setup_logging_levels() -> None:
    """Level names and numbers set the root level; unknown names fall back to WARNING."""
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        setup_logging(logging.INFO)
        assert root.level == logging.INFO
        setup_logging("chatty")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
