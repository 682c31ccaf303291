from __future__ import annotations

import logging
import sys
from logging import Handler
from pathlib import Path

from .formatters import JSONFormatter, HumanReadableFormatter


AUDIT_LOG_FILENAME = "audit.jsonl"


def json_lines_handler(path: Path, level: int = logging.INFO) -> Handler:
    """Append one JSON object per record to ``path``; the file is opened on first write."""
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(JSONFormatter())
    handler.setLevel(level)
    return handler


def console_handler(level: int = logging.INFO) -> Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(HumanReadableFormatter())
    handler.setLevel(level)
    return handler


def audit_handlers(
    *,
    logs_dir: Path | None,
    json_file: bool,
    console_output: bool,
    level: int,
) -> list[Handler]:
    """Handlers selected by the logging config.

    JSON lines go to ``<logs_dir>/audit.jsonl`` and are skipped when no
    directory is known.
    """
    handlers: list[Handler] = []
    if json_file and logs_dir is not None:
        handlers.append(json_lines_handler(logs_dir / AUDIT_LOG_FILENAME, level))
    if console_output:
        handlers.append(console_handler(level))
    return handlers
