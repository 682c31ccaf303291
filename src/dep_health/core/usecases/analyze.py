from __future__ import annotations

from typing import Any

from ..domain.manifest import extract_dependencies
from ..domain.models import AuditReport
from ..ports import AuditIdGeneratorPort, ClockPort, LoggerPort, ReportStorePort
from ..services import BatchAnalyzer


class AnalyzeManifestUseCase:
    """Use case for auditing the dependencies of a decoded package.json.

    Extracts the dependency mapping, runs the batch analysis and stores the
    resulting report under a fresh audit identifier.
    """

    def __init__(
        self,
        *,
        analyzer: BatchAnalyzer,
        store: ReportStorePort,
        id_gen: AuditIdGeneratorPort,
        clock: ClockPort,
        logger: LoggerPort,
    ) -> None:
        self._analyzer = analyzer
        self._store = store
        self._id_gen = id_gen
        self._clock = clock
        self._logger = logger

    def execute(self, *, manifest: dict[str, Any], repository: str | None = None) -> AuditReport:
        """Execute the audit.

        Args:
            manifest: Decoded package.json document
            repository: Optional owner/name label of the source repository

        Returns:
            The stored audit report

        Raises:
            MalformedManifestError: If the manifest declares no dependencies
        """
        dependencies = extract_dependencies(manifest)
        results = self._analyzer.analyze_all(dependencies)

        report = AuditReport(
            id=self._id_gen.generate(),
            created_at=self._clock.now(),
            total_dependencies=len(dependencies),
            results=tuple(results),
            repository=repository,
        )
        self._store.put(report.id, report)
        self._logger.info(
            "audit_stored",
            audit_id=report.id,
            repository=repository,
            total_dependencies=report.total_dependencies,
        )
        return report
