"""
Environment-backed configuration for the shell list models.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from shell_models import logger as app_logger

_LOGGER = app_logger.get_logger()

_PREFIX = "SHELL_MODELS_"
_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(eq=True)
class ShellSettings:
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    dedupe_payloads: bool = True
    sort_snapshots: bool = False


class ShellSettingsManager:
    """Loads settings from SHELL_MODELS_* environment variables and rejects invalid data."""

    def __init__(self, *, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def read_settings(self) -> ShellSettings:
        return ShellSettings(
            log_level=self._read_log_level(),
            log_dir=self._read_path("LOG_DIR"),
            dedupe_payloads=self._read_bool("DEDUPE_PAYLOADS", True),
            sort_snapshots=self._read_bool("SORT_SNAPSHOTS", False),
        )

    def _read(self, name: str) -> Optional[str]:
        raw = self._environ.get(_PREFIX + name)
        if raw is None or raw.strip() == "":
            return None
        return raw.strip()

    def _read_bool(self, name: str, default: bool) -> bool:
        raw = self._read(name)
        if raw is None:
            return default
        lowered = raw.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        _LOGGER.warning("Setting {}{} has unexpected value {!r}; using {}.", _PREFIX, name, raw, default)
        return default

    def _read_log_level(self) -> str:
        raw = self._read("LOG_LEVEL")
        if raw is None:
            return "INFO"
        level = raw.upper()
        if level not in _LOG_LEVELS:
            _LOGGER.warning("Unknown log level {!r} in {}LOG_LEVEL; falling back to INFO.", raw, _PREFIX)
            return "INFO"
        return level

    def _read_path(self, name: str) -> Optional[Path]:
        raw = self._read(name)
        if raw is None:
            return None
        return Path(raw).expanduser()
