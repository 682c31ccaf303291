from __future__ import annotations

from typing import Optional

from ..core.domain.models import AuditReport


class InMemoryReportStore:
    """Process-lifetime report store.

    Reports never expire and are lost on restart. Each write is a single dict
    insertion under a fresh key.
    """

    def __init__(self) -> None:
        self._reports: dict[str, AuditReport] = {}

    def put(self, audit_id: str, report: AuditReport) -> None:
        self._reports[audit_id] = report

    def get(self, audit_id: str) -> Optional[AuditReport]:
        return self._reports.get(audit_id)

    def __len__(self) -> int:
        return len(self._reports)
