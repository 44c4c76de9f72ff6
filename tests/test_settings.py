"""Tests for environment-driven settings and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from revalidator.services.settings import Settings, configure_logging
from revalidator.utils.logging import setup_logging


def test_from_env_returns_defaults_without_variables() -> None:
    assert Settings.from_env({}) == Settings()


def test_from_env_parses_typed_values() -> None:
    settings = Settings.from_env(
        {
            "REVALIDATOR_LOG_LEVEL": "ERROR",
            "REVALIDATOR_DEBUG_LOGGING": "yes",
            "REVALIDATOR_CONSOLE_LOGGING": "0",
            "REVALIDATOR_LOG_MAX_BYTES": "2048",
            "REVALIDATOR_LOG_DIR": "/var/log/revalidator",
            "REVALIDATOR_UNRELATED": "ignored",
        }
    )

    assert settings == Settings(
        log_level="ERROR",
        debug_logging=True,
        console_logging=False,
        log_max_bytes=2048,
        log_dir="/var/log/revalidator",
    )


def test_from_env_keeps_default_for_invalid_integers(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="revalidator"):
        settings = Settings.from_env({"REVALIDATOR_LOG_BACKUP_COUNT": "many"})

    assert settings.log_backup_count == 3
    assert "REVALIDATOR_LOG_BACKUP_COUNT" in caplog.text


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVALIDATOR_LOG_LEVEL", "WARNING")

    assert Settings.from_env().log_level == "WARNING"


def test_resolved_log_level() -> None:
    assert Settings(log_level="warning").resolved_log_level() == logging.WARNING
    assert Settings(log_level="ERROR", debug_logging=True).resolved_log_level() == logging.DEBUG
    assert Settings(log_level="chatty").resolved_log_level() == logging.INFO


def test_configure_logging_writes_to_log_dir(tmp_path: Path) -> None:
    settings = Settings(log_dir=str(tmp_path), console_logging=False, debug_logging=True)

    log_path = configure_logging(settings, force=True)
    logging.getLogger("revalidator.tests").debug("hello from the tests")
    for handler in logging.getLogger("revalidator").handlers:
        handler.flush()

    assert log_path == tmp_path / "revalidator.log"
    assert "hello from the tests" in log_path.read_text(encoding="utf-8")
    assert configure_logging(settings) == log_path


def test_configure_logging_reads_environment_by_default(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("REVALIDATOR_LOG_DIR", str(tmp_path / "from-env"))
    monkeypatch.setenv("REVALIDATOR_CONSOLE_LOGGING", "false")

    log_path = configure_logging(force=True)

    assert log_path == tmp_path / "from-env" / "revalidator.log"
    assert logging.getLogger("revalidator").handlers[0].__class__.__name__ == "RotatingFileHandler"
    assert len(logging.getLogger("revalidator").handlers) == 1


def test_setup_logging_replaces_handlers_when_forced(tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path / "one", console=False, force=True)
    log_path = setup_logging(log_dir=tmp_path / "two", console=True, force=True)

    assert log_path == tmp_path / "two" / "revalidator.log"
    assert len(logging.getLogger("revalidator").handlers) == 2
