"""CLI output formatting utilities for human-readable display."""

from __future__ import annotations

from ..core.domain.models import AuditReport, HealthRecord
from ..core.services.report_builder import (
    average_health_score,
    health_distribution,
    license_breakdown,
)


def _record_row(r: HealthRecord) -> str:
    dependency = r.dependency if len(r.dependency) <= 35 else r.dependency[:32] + "..."
    version = r.version if len(r.version) <= 14 else r.version[:11] + "..."
    last_release = r.last_release.isoformat() if r.last_release else "N/A"
    downloads = f"{r.downloads:,}" if r.downloads is not None else "N/A"
    row = f"{dependency:<35} {version:<14} {r.license:<14} {last_release:<12} {downloads:>12} {r.health_score:>6.1f}"
    if r.error:
        row += f"  ({r.error})"
    return row


def format_report(report: AuditReport, *, limit: int | None = None) -> str:
    """Format an audit report for human-readable CLI output.

    Args:
        report: Audit report
        limit: Show at most this many records (all when None)
    """
    records = report.results if limit is None else report.results[:limit]

    lines = []
    lines.append("=" * 100)
    lines.append("DEPENDENCY HEALTH REPORT")
    lines.append("=" * 100)
    lines.append(f"\nAudit ID: {report.id}")
    if report.repository:
        lines.append(f"Repository: {report.repository}")
    lines.append(f"Timestamp: {report.timestamp}")
    lines.append(
        f"Dependencies: {report.total_dependencies} | "
        f"Average health score: {average_health_score(report.results):.2f}"
    )

    distribution = health_distribution(report.results)
    lines.append(
        "Health: " + ", ".join(f"{band} {count}" for band, count in distribution.items())
    )
    licenses = license_breakdown(report.results)
    lines.append(
        "Licenses: " + ", ".join(f"{name} {count}" for name, count in sorted(licenses.items()))
    )

    lines.append("\n" + "-" * 100)
    lines.append(
        f"{'Dependency':<35} {'Version':<14} {'License':<14} {'Released':<12} {'Downloads':>12} {'Score':>6}"
    )
    lines.append("-" * 100)
    for r in records:
        lines.append(_record_row(r))
    lines.append("-" * 100)

    hidden = len(report.results) - len(records)
    if hidden > 0:
        lines.append(f"... {hidden} more (use --limit to show more)")

    return "\n".join(lines)


def format_record(record: HealthRecord) -> str:
    """Format a single package's health record."""
    lines = [
        f"Package: {record.dependency}@{record.version}",
        f"Health score: {record.health_score:.1f}",
        f"License: {record.license}",
        f"Last release: {record.last_release.isoformat() if record.last_release else 'N/A'}",
    ]
    if record.ok:
        lines.append(f"Maintainers: {record.maintainers or 0}")
        lines.append(f"Weekly downloads: {record.downloads or 0:,}")
        if record.repository:
            lines.append(f"Repository: {record.repository}")
    else:
        lines.append(f"Error: {record.error}")
    return "\n".join(lines)
