from __future__ import annotations

from ..domain.exceptions import NoDependenciesError
from ..domain.models import AuditReport
from ..domain.repository import parse_github_url
from ..ports import LoggerPort, ManifestSourcePort
from .analyze import AnalyzeManifestUseCase


class AnalyzeGitHubUseCase:
    """Use case for auditing a GitHub repository's package.json.

    Thin layer over AnalyzeManifestUseCase that resolves the manifest first.
    """

    def __init__(
        self,
        *,
        manifest_source: ManifestSourcePort,
        analyze: AnalyzeManifestUseCase,
        logger: LoggerPort,
    ) -> None:
        self._manifest_source = manifest_source
        self._analyze = analyze
        self._logger = logger

    def execute(self, *, repo_url: str) -> AuditReport:
        """Execute the audit.

        Raises:
            InvalidRepositoryUrlError: If repo_url is not a GitHub repository
            ManifestNotFoundError: If package.json cannot be fetched
            NoDependenciesError: If it declares no dependencies
            MalformedManifestError: If a dependency section is malformed
        """
        repo = parse_github_url(repo_url)
        manifest = self._manifest_source.fetch_manifest(repo)
        self._logger.info("manifest_fetched", repository=repo.slug)
        try:
            return self._analyze.execute(manifest=manifest, repository=repo.slug)
        except NoDependenciesError as e:
            raise NoDependenciesError("No dependencies found in repository") from e
