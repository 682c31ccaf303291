from __future__ import annotations

from dependency_injector import containers, providers

from ..core.ports import SystemClock, UuidAuditIdGenerator
from ..core.services import BatchAnalyzer, PackageHealthScorer
from ..core.usecases.analyze import AnalyzeManifestUseCase
from ..core.usecases.analyze_github import AnalyzeGitHubUseCase
from ..core.usecases.reports import ExportReportUseCase, GetReportUseCase
from ..infra.github import GitHubManifestSource
from ..infra.logging import AuditLogger
from ..infra.registry import NpmRegistry
from ..infra.report_store import InMemoryReportStore


class Container(containers.DeclarativeContainer):
    """DI container; configuration is loaded from an AppConfig via from_pydantic."""

    config = providers.Configuration()

    # Adapters
    registry = providers.Singleton(
        NpmRegistry,
        base_url=config.registry.url,
        downloads_url=config.registry.downloads_url,
        timeout=config.registry.timeout_seconds,
    )

    manifest_source = providers.Singleton(
        GitHubManifestSource,
        raw_base_url=config.github.raw_base_url,
        branches=config.github.branches,
        token=config.github.token,
        timeout=config.github.timeout_seconds,
    )

    # One store per container; the HTTP server keeps a single container alive
    report_store = providers.Singleton(InMemoryReportStore)

    id_gen = providers.Singleton(UuidAuditIdGenerator)

    clock = providers.Singleton(SystemClock)

    # Logger (Resource: manages handler lifecycle with init/shutdown)
    logger = providers.Resource(
        AuditLogger,
        logs_dir=config.directories.logs_dir,
        logger_name=config.logging.logger_name,
        console_output=config.logging.console_output,
        json_file=config.logging.json_file,
        level=config.logging.level,
    )

    # Domain services
    scorer = providers.Factory(
        PackageHealthScorer,
        registry=registry,
        clock=clock,
        logger=logger,
    )

    batch_analyzer = providers.Factory(
        BatchAnalyzer,
        scorer=scorer,
        logger=logger,
        max_workers=config.analysis.max_workers,
    )

    # Use cases
    analyze_uc = providers.Factory(
        AnalyzeManifestUseCase,
        analyzer=batch_analyzer,
        store=report_store,
        id_gen=id_gen,
        clock=clock,
        logger=logger,
    )

    analyze_github_uc = providers.Factory(
        AnalyzeGitHubUseCase,
        manifest_source=manifest_source,
        analyze=analyze_uc,
        logger=logger,
    )

    report_uc = providers.Factory(
        GetReportUseCase,
        store=report_store,
    )

    export_uc = providers.Factory(
        ExportReportUseCase,
        store=report_store,
    )
