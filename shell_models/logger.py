"""
Logging setup for the shell list models.

The file sink lives under SHELL_MODELS_LOG_DIR (default
~/.local/state/shell-models) and always records DEBUG; the console sink
level is chosen by the caller, normally from SHELL_MODELS_LOG_LEVEL.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_DIR = Path(
    os.environ.get(
        "SHELL_MODELS_LOG_DIR",
        str(Path.home() / ".local" / "state" / "shell-models"),
    )
)
DEFAULT_LOG_PATH = LOG_DIR / "shell-models.log"


def configure(log_path: Optional[Path] = None, *, console_level: str = "INFO", force: bool = False) -> None:
    """
    Configure loguru for the application.

    Runs once per process. Module-level loggers trigger a default
    configuration on import, so the entry point passes `force=True` to
    replace those sinks with the configured log path and `console_level`.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED and not force:
        return
    target = log_path or DEFAULT_LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)

    # Keep console output and add a persistent file sink.
    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=console_level, enqueue=True)
    _logger.add(
        target,
        level="DEBUG",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
