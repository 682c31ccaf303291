from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor

from ..domain.exceptions import MalformedManifestError
from ..domain.models import DependencySpec, HealthRecord
from ..ports import LoggerPort
from .health_scorer import PackageHealthScorer


BATCH_FAILURE = "Analysis failed"


class BatchAnalyzer:
    """Scores every declared dependency and ranks the results.

    Scorer calls run one after another unless ``max_workers`` > 1, in which
    case a bounded thread pool is used. Either way the output holds exactly
    one record per input entry, sorted by descending health score with ties
    kept in input order.
    """

    def __init__(
        self,
        *,
        scorer: PackageHealthScorer,
        logger: LoggerPort,
        max_workers: int = 1,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self._scorer = scorer
        self._logger = logger
        self._max_workers = max_workers

    def analyze_all(self, dependencies: Mapping[str, str] | None) -> list[HealthRecord]:
        """Score all dependencies.

        Args:
            dependencies: Mapping of package name to declared version

        Returns:
            One HealthRecord per entry, highest score first

        Raises:
            MalformedManifestError: If the mapping is absent or empty
        """
        if not dependencies:
            raise MalformedManifestError("No dependencies to analyze")

        specs = [DependencySpec(name=name, version=version) for name, version in dependencies.items()]
        self._logger.info("batch_started", count=len(specs), max_workers=self._max_workers)

        if self._max_workers == 1:
            records = [self._analyze_one(spec) for spec in specs]
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                records = list(pool.map(self._analyze_one, specs))

        degraded = sum(1 for r in records if not r.ok)
        self._logger.info("batch_finished", count=len(records), degraded=degraded)

        return sorted(records, key=lambda r: r.health_score, reverse=True)

    def _analyze_one(self, spec: DependencySpec) -> HealthRecord:
        try:
            return self._scorer.score(spec.name, spec.version).record
        except Exception:
            self._logger.exception("package_analysis_failed", package=spec.name)
            return HealthRecord.fallback(spec.name, spec.version, BATCH_FAILURE)
