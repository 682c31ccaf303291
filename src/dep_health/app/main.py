from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import AppConfig
from .container import Container
from ..core.domain.manifest import load_manifest
from ..core.domain.models import AuditReport, HealthRecord


def create_container(config: AppConfig | None = None) -> Container:
    """Create and initialize a container.

    Args:
        config: Optional config. If None, loads from environment variables.

    Returns:
        Initialized container instance
    """
    container = Container()

    if config is None:
        config = AppConfig()

    container.config.from_pydantic(config)
    container.init_resources()

    return container


def audit_manifest(
    manifest: dict[str, Any],
    *,
    repository: str | None = None,
    config: AppConfig | None = None,
) -> AuditReport:
    """Audit the dependencies declared by a decoded package.json.

    Args:
        manifest: package.json content as a dict
        repository: Optional label for the report (owner/name)
        config: Optional config for testing. If None, loads from env vars.

    Raises:
        MalformedManifestError: If no dependencies are declared
    """
    container = create_container(config)
    try:
        return container.analyze_uc().execute(manifest=manifest, repository=repository)
    finally:
        container.shutdown_resources()


def audit_file(path: str | Path, *, config: AppConfig | None = None) -> AuditReport:
    """Audit a package.json on disk."""
    manifest = load_manifest(Path(path).read_bytes())
    return audit_manifest(manifest, config=config)


def audit_github(repo_url: str, *, config: AppConfig | None = None) -> AuditReport:
    """Audit the package.json of a GitHub repository.

    Raises:
        InvalidRepositoryUrlError: If repo_url is not a GitHub repository URL
        ManifestNotFoundError: If no package.json is found
    """
    container = create_container(config)
    try:
        return container.analyze_github_uc().execute(repo_url=repo_url)
    finally:
        container.shutdown_resources()


def score_package(
    name: str,
    version: str = "latest",
    *,
    config: AppConfig | None = None,
) -> HealthRecord:
    """Score a single package; degraded records carry ``error``."""
    container = create_container(config)
    try:
        return container.scorer().score(name, version).record
    finally:
        container.shutdown_resources()
