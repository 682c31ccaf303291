from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Protocol

from .domain.models import AuditReport, GitHubRepository


class RegistryPort(Protocol):
    """Port for fetching package metadata from the npm registry."""

    def fetch_package(self, name: str) -> dict[str, Any]:
        """Fetch the registry document for a package.

        Returns:
            Decoded registry JSON document

        Raises:
            RegistryUnavailableError: On network failure, timeout, non-success
                status or a body that is not a JSON object
        """
        ...

    def fetch_weekly_downloads(self, name: str) -> Optional[int]:
        """Return last-week download count, or None when unavailable."""
        ...


class ManifestSourcePort(Protocol):
    """Port for fetching a package.json from a remote repository."""

    def fetch_manifest(self, repo: GitHubRepository) -> dict[str, Any]:
        """Fetch and decode package.json.

        Raises:
            ManifestNotFoundError: If no configured branch has a package.json
            MalformedManifestError: If the file is not a JSON object
        """
        ...


class ReportStorePort(Protocol):
    """Port for keeping completed audit reports."""

    def put(self, audit_id: str, report: AuditReport) -> None:
        ...

    def get(self, audit_id: str) -> Optional[AuditReport]:
        ...


class AuditIdGeneratorPort(Protocol):
    def generate(self) -> str:
        ...


class ClockPort(Protocol):
    def now(self) -> datetime:
        """Return the current timezone-aware UTC time."""
        ...


class LoggerPort(Protocol):
    """Port for structured logging.

    Structured fields are passed as keyword arguments and end up as
    top-level keys of JSON log lines.
    """

    def debug(self, message: str, **kwargs: Any) -> None:
        ...

    def info(self, message: str, **kwargs: Any) -> None:
        ...

    def warning(self, message: str, **kwargs: Any) -> None:
        ...

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        ...

    def exception(self, message: str, **kwargs: Any) -> None:
        ...


class UuidAuditIdGenerator:
    def generate(self) -> str:
        return str(uuid.uuid4())


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
