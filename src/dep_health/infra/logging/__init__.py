from __future__ import annotations

from .logger import AuditLogger
from .handlers import AUDIT_LOG_FILENAME, audit_handlers, console_handler, json_lines_handler
from .formatters import JSONFormatter, HumanReadableFormatter

__all__ = [
    "AuditLogger",
    "AUDIT_LOG_FILENAME",
    "audit_handlers",
    "console_handler",
    "json_lines_handler",
    "JSONFormatter",
    "HumanReadableFormatter",
]
