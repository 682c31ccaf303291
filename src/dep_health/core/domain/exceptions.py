"""Domain exceptions for dep_health."""

from __future__ import annotations


class DepHealthError(Exception):
    """Base class for all dep_health errors."""


class RegistryUnavailableError(DepHealthError):
    """Raised when the package registry cannot be reached or answers with an error.

    Covers network failures, timeouts, non-success HTTP statuses and bodies
    that are not JSON. The scorer converts it into a fallback record.
    """

    def __init__(self, package: str, message: str | None = None) -> None:
        self.package = package
        if message is None:
            message = f"Package not found: {package}"
        super().__init__(message)


class RegistryDataError(DepHealthError):
    """Raised when a registry document lacks data required for scoring."""

    def __init__(self, package: str, message: str) -> None:
        self.package = package
        super().__init__(message)


class MalformedManifestError(DepHealthError, ValueError):
    """Raised when a manifest is unusable or declares no dependencies."""


class NoDependenciesError(MalformedManifestError):
    """Raised when a manifest declares neither dependencies nor devDependencies."""


class InvalidRepositoryUrlError(DepHealthError, ValueError):
    """Raised when a repository URL does not point at a GitHub repository."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid GitHub repository URL: {url}")


class ManifestNotFoundError(DepHealthError):
    """Raised when package.json cannot be fetched from a repository."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Could not find package.json in repository {slug}")


class ReportNotFoundError(DepHealthError, LookupError):
    """Raised when an audit identifier has no stored report."""

    def __init__(self, audit_id: str) -> None:
        self.audit_id = audit_id
        super().__init__(f"Audit report not found: {audit_id}")
