from __future__ import annotations

import logging
from pathlib import Path

from dependency_injector.resources import Resource

from .handlers import audit_handlers


class AuditLogger(Resource):
    """Structured logger for the audit workflow.

    Keyword arguments given to the logging methods are attached to the record
    as ``extra`` fields. Handlers are owned by the resource and released on
    shutdown.
    """

    def init(
        self,
        *,
        logs_dir: Path | None = None,
        logger_name: str = "dep_health",
        console_output: bool = False,
        json_file: bool = False,
        level: str = "INFO",
    ) -> "AuditLogger":
        """Attach the configured handlers.

        Args:
            logs_dir: Directory for ``audit.jsonl``
            logger_name: Logger name
            console_output: Log human-readable lines to stderr
            json_file: Append JSON lines to the audit log file
            level: Logging level name (DEBUG, INFO, WARNING, ERROR)

        Returns:
            Self for dependency_injector Resource pattern
        """
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            numeric_level = logging.INFO

        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(numeric_level)
        self._logger.propagate = False
        self._logger.handlers.clear()

        self._handlers = audit_handlers(
            logs_dir=logs_dir,
            json_file=json_file,
            console_output=console_output,
            level=numeric_level,
        )
        for handler in self._handlers:
            self._logger.addHandler(handler)

        return self

    def shutdown(self, resource: "AuditLogger") -> None:
        """Flush and close all handlers owned by this logger."""
        for handler in self._handlers:
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
        self._handlers = []

    def debug(self, message: str, **kwargs) -> None:
        self._logger.debug(message, extra=kwargs or None)

    def info(self, message: str, **kwargs) -> None:
        self._logger.info(message, extra=kwargs or None)

    def warning(self, message: str, **kwargs) -> None:
        self._logger.warning(message, extra=kwargs or None)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self._logger.error(message, extra=kwargs or None, exc_info=exc_info)

    def exception(self, message: str, **kwargs) -> None:
        self._logger.exception(message, extra=kwargs or None)
