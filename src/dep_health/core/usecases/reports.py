from __future__ import annotations

from typing import Any

from ..domain.exceptions import ReportNotFoundError
from ..domain.models import AuditReport
from ..ports import ReportStorePort
from ..services.report_builder import build_export, export_filename


class GetReportUseCase:
    """Use case for retrieving a stored audit report."""

    def __init__(self, *, store: ReportStorePort) -> None:
        self._store = store

    def execute(self, *, audit_id: str) -> AuditReport:
        report = self._store.get(audit_id)
        if report is None:
            raise ReportNotFoundError(audit_id)
        return report


class ExportReportUseCase:
    """Use case for exporting a stored report as a downloadable document."""

    def __init__(self, *, store: ReportStorePort) -> None:
        self._store = store

    def execute(self, *, audit_id: str) -> tuple[str, dict[str, Any]]:
        """Return (filename, export payload) for a stored report.

        Raises:
            ReportNotFoundError: If no report is stored under audit_id
        """
        report = self._store.get(audit_id)
        if report is None:
            raise ReportNotFoundError(audit_id)
        return export_filename(report.id), build_export(report)
