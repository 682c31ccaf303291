from __future__ import annotations

import math
from typing import Any

from ..domain.exceptions import DepHealthError, RegistryDataError
from ..domain.models import UNKNOWN_LICENSE, HealthRecord, ScoreOutcome
from ..domain.scoring import compute_health_score
from ..ports import ClockPort, LoggerPort, RegistryPort
from ...shared.time_utils import days_between, parse_timestamp


class PackageHealthScorer:
    """Scores a single package from its npm registry document.

    Never raises for a per-package failure: registry errors, missing data and
    unreadable documents all become a degraded ScoreOutcome carrying the
    fallback record.
    """

    def __init__(
        self,
        *,
        registry: RegistryPort,
        clock: ClockPort,
        logger: LoggerPort,
    ) -> None:
        self._registry = registry
        self._clock = clock
        self._logger = logger

    def score(self, name: str, declared_version: str) -> ScoreOutcome:
        """Fetch registry metadata for ``name`` and compute its health record.

        Args:
            name: Package name as it appears in the manifest
            declared_version: Version string as declared (kept verbatim)

        Returns:
            ScoreOutcome, degraded when the package could not be analyzed
        """
        try:
            document = self._registry.fetch_package(name)
            record = self._build_record(name, declared_version, document)
        except DepHealthError as e:
            self._logger.warning("package_degraded", package=name, reason=str(e))
            return ScoreOutcome.degraded(name, declared_version, str(e))
        except Exception as e:
            reason = f"Unreadable registry data for {name}: {e}"
            self._logger.exception("package_degraded", package=name, reason=reason)
            return ScoreOutcome.degraded(name, declared_version, reason)

        self._logger.debug(
            "package_scored",
            package=name,
            health_score=record.health_score,
            license=record.license,
        )
        return ScoreOutcome.success(record)

    def _build_record(self, name: str, declared_version: str, document: dict[str, Any]) -> HealthRecord:
        license = _latest_license(document)

        released_at = _last_release(document)
        if released_at is None:
            raise RegistryDataError(name, f"No release timestamp for {name}")
        days = days_between(released_at, self._clock.now())

        downloads = _as_count(document.get("downloads"))
        if downloads is None:
            downloads = self._registry.fetch_weekly_downloads(name) or 0

        return HealthRecord(
            dependency=name,
            version=declared_version,
            license=license,
            last_release=released_at.date(),
            health_score=compute_health_score(
                license=license,
                days_since_release=days,
                weekly_downloads=downloads,
            ),
            maintainers=_maintainer_count(document),
            downloads=downloads,
            repository=_repository_url(document),
        )


def _latest_license(document: dict[str, Any]) -> str:
    dist_tags = document.get("dist-tags") or {}
    latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
    if not isinstance(latest, str):
        return UNKNOWN_LICENSE
    versions = document.get("versions") or {}
    info = versions.get(latest) if isinstance(versions, dict) else None
    if not isinstance(info, dict):
        return UNKNOWN_LICENSE

    license = info.get("license")
    # Legacy manifests use {"type": "MIT", "url": ...}
    if isinstance(license, dict):
        license = license.get("type")
    if isinstance(license, str) and license.strip():
        return license.strip()
    return UNKNOWN_LICENSE


def _last_release(document: dict[str, Any]):
    times = document.get("time")
    if not isinstance(times, dict):
        return None
    return parse_timestamp(times.get("modified")) or parse_timestamp(times.get("created"))


def _as_count(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return max(0, int(value))


def _maintainer_count(document: dict[str, Any]) -> int:
    maintainers = document.get("maintainers")
    return len(maintainers) if isinstance(maintainers, list) else 0


def _repository_url(document: dict[str, Any]) -> str | None:
    repository = document.get("repository")
    if isinstance(repository, dict):
        url = repository.get("url")
        return url if isinstance(url, str) and url else None
    if isinstance(repository, str) and repository:
        return repository
    return None
