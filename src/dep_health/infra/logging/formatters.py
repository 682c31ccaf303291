from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter


# Attributes every LogRecord carries; anything else arrived through ``extra``
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def structured_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the fields passed to the logger via ``extra``."""
    return {k: v for k, v in vars(record).items() if k not in _RESERVED and not k.startswith("_")}


class JSONFormatter(JsonFormatter):
    """JSON-lines formatter using python-json-logger.

    Structured fields given via ``extra`` become top-level keys.
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = self.formatTime(record, "%Y-%m-%dT%H:%M:%S")
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['message'] = record.getMessage()


class HumanReadableFormatter(logging.Formatter):
    """Console formatter: ``time - LEVEL - event key=value ...``."""

    def __init__(self) -> None:
        super().__init__(
            fmt='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = structured_fields(record)
        if not fields:
            return line
        suffix = " ".join(f"{k}={v}" for k, v in fields.items())
        first, sep, rest = line.partition("\n")
        return f"{first} {suffix}{sep}{rest}"
