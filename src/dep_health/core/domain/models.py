from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any


FALLBACK_SCORE = 3.0
UNKNOWN_LICENSE = "Unknown"


@dataclass(frozen=True)
class DependencySpec:
    """A dependency as declared by a manifest.

    ``version`` is the declared string (often a semver range), never a
    resolved version.
    """
    name: str
    version: str


@dataclass(frozen=True)
class HealthRecord:
    """Health assessment of a single dependency."""
    dependency: str
    version: str
    license: str
    last_release: date | None
    health_score: float

    # Present only when scoring succeeded
    maintainers: int | None = None
    downloads: int | None = None
    repository: str | None = None

    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def fallback(cls, name: str, version: str, error: str) -> HealthRecord:
        """Neutral record substituted when a package could not be analyzed."""
        return cls(
            dependency=name,
            version=version,
            license=UNKNOWN_LICENSE,
            last_release=None,
            health_score=FALLBACK_SCORE,
            error=error,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "dependency": self.dependency,
            "version": self.version,
            "license": self.license,
            "last_release": self.last_release.isoformat() if self.last_release else None,
            "health_score": self.health_score,
        }
        if self.ok:
            data["maintainers"] = self.maintainers or 0
            data["downloads"] = self.downloads or 0
            data["repository"] = self.repository
        else:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class ScoreOutcome:
    """Result of scoring one package.

    Either a fully scored record (``ok``) or a degraded one carrying the
    fallback record and the failure description.
    """
    record: HealthRecord

    @property
    def ok(self) -> bool:
        return self.record.ok

    @property
    def error(self) -> str | None:
        return self.record.error

    @classmethod
    def success(cls, record: HealthRecord) -> ScoreOutcome:
        return cls(record=record)

    @classmethod
    def degraded(cls, name: str, version: str, error: str) -> ScoreOutcome:
        return cls(record=HealthRecord.fallback(name, version, error))


@dataclass(frozen=True)
class GitHubRepository:
    """GitHub repository coordinates."""
    owner: str
    name: str

    @property
    def slug(self) -> str:
        """Returns owner/name format."""
        return f"{self.owner}/{self.name}"

    @property
    def url(self) -> str:
        """Returns GitHub HTTPS URL."""
        return f"https://github.com/{self.slug}"


@dataclass(frozen=True)
class AuditReport:
    """Completed audit of a dependency set.

    Aggregate root held by the report store; ``results`` are sorted by
    descending health score.
    """
    id: str
    created_at: datetime
    total_dependencies: int
    results: tuple[HealthRecord, ...] = field(default_factory=tuple)
    repository: str | None = None  # owner/name when fetched from GitHub

    @property
    def timestamp(self) -> str:
        return self.created_at.isoformat().replace("+00:00", "Z")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "timestamp": self.timestamp,
        }
        if self.repository is not None:
            data["repository"] = self.repository
        data["totalDependencies"] = self.total_dependencies
        data["results"] = [record.to_dict() for record in self.results]
        return data
