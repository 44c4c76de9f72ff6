"""Logging configuration read from the host environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from ..utils.logging import setup_logging

__all__ = ["Settings", "configure_logging"]

LOGGER = logging.getLogger(__name__)
_ENV_PREFIX = "REVALIDATOR_"
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


@dataclass(slots=True)
class Settings:
    """Options controlling where and how loudly the engine logs."""

    log_level: str = "INFO"
    debug_logging: bool = False
    log_dir: str | None = None
    console_logging: bool = True
    log_max_bytes: int = 1_000_000
    log_backup_count: int = 3

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``REVALIDATOR_<FIELD>`` variables.

        Values that cannot be parsed are logged and the default is kept.
        """

        source = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for item in fields(cls):
            raw = source.get(_ENV_PREFIX + item.name.upper())
            if raw is None:
                continue
            default = item.default
            if isinstance(default, bool):
                values[item.name] = raw.strip().lower() in _TRUE_VALUES
            elif isinstance(default, int):
                try:
                    values[item.name] = int(raw, 10)
                except ValueError:
                    LOGGER.warning("Ignoring %s%s=%r: not an integer", _ENV_PREFIX, item.name.upper(), raw)
            else:
                values[item.name] = raw
        return replace(cls(), **values)

    def resolved_log_level(self) -> int:
        """Return the numeric logging level, forcing ``DEBUG`` when debug logging is on."""

        if self.debug_logging:
            return logging.DEBUG
        level = logging.getLevelName(str(self.log_level).strip().upper())
        if isinstance(level, int):
            return level
        LOGGER.warning("Unknown log level %r; falling back to INFO", self.log_level)
        return logging.INFO


def configure_logging(settings: Settings | None = None, *, force: bool = False) -> Path:
    """Install the package log handlers; reads the environment when ``settings`` is omitted."""

    settings = settings or Settings.from_env()
    return setup_logging(
        settings.resolved_log_level(),
        log_dir=settings.log_dir,
        console=settings.console_logging,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        force=force,
    )
