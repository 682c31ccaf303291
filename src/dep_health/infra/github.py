from __future__ import annotations

import logging
from typing import Any, Sequence

import requests

from ..core.domain.exceptions import ManifestNotFoundError
from ..core.domain.manifest import load_manifest
from ..core.domain.models import GitHubRepository


debug_logger = logging.getLogger(__name__)


class GitHubManifestSource:
    """Fetches package.json from raw.githubusercontent.com.

    Branches are tried in order; the first one serving the file wins.
    """

    def __init__(
        self,
        *,
        raw_base_url: str,
        branches: Sequence[str],
        timeout: float,
        token: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._raw_base_url = raw_base_url.rstrip("/")
        self._branches = list(branches)
        self._timeout = timeout
        self._token = token
        self._session = session or requests.Session()

    def fetch_manifest(self, repo: GitHubRepository) -> dict[str, Any]:
        headers = {"Authorization": f"token {self._token}"} if self._token else {}

        for branch in self._branches:
            url = f"{self._raw_base_url}/{repo.owner}/{repo.name}/{branch}/package.json"
            try:
                response = self._session.get(url, headers=headers, timeout=self._timeout)
            except requests.RequestException as e:
                debug_logger.warning("Fetching %s failed: %s", url, e)
                continue
            if response.ok:
                return load_manifest(response.content)
            debug_logger.debug("No package.json at %s (status %s)", url, response.status_code)

        raise ManifestNotFoundError(repo.slug)
