"""Aggregate views over health records: summaries, breakdowns and export payloads."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any

from ..domain.models import UNKNOWN_LICENSE, AuditReport, HealthRecord


UPLOADED_MANIFEST_LABEL = "uploaded-package.json"

# Lower bound of each band, checked from the top
HEALTH_BANDS = (
    ("excellent", 8.0),
    ("good", 6.0),
    ("fair", 4.0),
)


def average_health_score(records: Sequence[HealthRecord]) -> float:
    if not records:
        return 0.0
    return round(sum(r.health_score for r in records) / len(records), 2)


def license_breakdown(records: Sequence[HealthRecord]) -> dict[str, int]:
    return dict(Counter(r.license or UNKNOWN_LICENSE for r in records))


def health_band(score: float) -> str:
    for band, lower in HEALTH_BANDS:
        if score >= lower:
            return band
    return "poor"


def health_distribution(records: Sequence[HealthRecord]) -> dict[str, int]:
    distribution = {"excellent": 0, "good": 0, "fair": 0, "poor": 0}
    for r in records:
        distribution[health_band(r.health_score)] += 1
    return distribution


def build_analysis_response(report: AuditReport, *, preview_limit: int) -> dict[str, Any]:
    """Response returned right after an analysis: summary plus top results."""
    data: dict[str, Any] = {"auditId": report.id}
    if report.repository is not None:
        data["repository"] = report.repository
    data["summary"] = {
        "totalDependencies": report.total_dependencies,
        "analyzedDependencies": len(report.results),
        "averageHealthScore": average_health_score(report.results),
    }
    data["results"] = [r.to_dict() for r in report.results[:preview_limit]]
    return data


def build_export(report: AuditReport) -> dict[str, Any]:
    """Downloadable audit document with license and health breakdowns."""
    return {
        "audit_id": report.id,
        "timestamp": report.timestamp,
        "repository": report.repository or UPLOADED_MANIFEST_LABEL,
        "summary": {
            "total_dependencies": report.total_dependencies,
            "analyzed_dependencies": len(report.results),
            "average_health_score": average_health_score(report.results),
            "license_breakdown": license_breakdown(report.results),
            "health_distribution": health_distribution(report.results),
        },
        "dependencies": [r.to_dict() for r in report.results],
    }


def export_filename(audit_id: str) -> str:
    return f"audit-{audit_id}.json"
