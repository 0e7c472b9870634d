"""
Entry point replaying recorded bus responses through the shell list models.

Each input line is a JSON object `{"method": "/listApps", "payload": {...}}`.
The payload may also be a JSON-encoded string, as delivered by the bus. The
resulting model contents are printed to stdout as JSON.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import IO, Iterable, List, Optional, Sequence

from PySide6.QtCore import QCoreApplication

from core.app import ShellModels
from core.service_router import RouteOutcome
from core.settings import ShellSettingsManager
from shell_models import logger as app_logger

_USAGE = "usage: shell-models-replay [RECORDING.jsonl]"


def replay(models: ShellModels, lines: Iterable[str]) -> List[RouteOutcome]:
    """Feed recorded responses to the models, skipping lines that are not valid records."""
    logger = app_logger.get_logger()
    outcomes: List[RouteOutcome] = []
    for number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            record = json.loads(stripped)
        except json.JSONDecodeError as exc:
            logger.error("Skipping line {}: not valid JSON ({}).", number, exc)
            continue
        if not isinstance(record, dict) or not isinstance(record.get("method"), str) or "payload" not in record:
            logger.error("Skipping line {}: expected an object with method and payload.", number)
            continue
        outcomes.append(models.dispatch(record["method"], record["payload"]))
    return outcomes


def main(argv: Optional[Sequence[str]] = None, *, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> int:
    """Replay a recording (or stdin) and print the resulting model snapshot."""
    args = list(sys.argv[1:] if argv is None else argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    settings = ShellSettingsManager().read_settings()
    log_path = settings.log_dir / "shell-models.log" if settings.log_dir else None
    app_logger.configure(log_path, console_level=settings.log_level, force=True)
    logger = app_logger.get_logger()

    if len(args) > 1:
        print(_USAGE, file=sys.stderr)
        return 2

    app = QCoreApplication.instance() or QCoreApplication([sys.argv[0] if sys.argv else "shell-models"])
    models = ShellModels(settings=settings, parent=app)

    if args:
        recording = Path(args[0])
        try:
            with recording.open(encoding="utf-8") as handle:
                outcomes = replay(models, handle)
        except FileNotFoundError:
            logger.error("Recording not found: {}", recording)
            return 2
    else:
        outcomes = replay(models, stdin)

    routed = sum(1 for outcome in outcomes if outcome is RouteOutcome.ROUTED)
    logger.info("Replayed {} responses, {} applied.", len(outcomes), routed)
    json.dump(models.snapshot(), stdout, indent=2, sort_keys=True, default=str)
    stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
