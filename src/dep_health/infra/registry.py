from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..core.domain.exceptions import RegistryUnavailableError


debug_logger = logging.getLogger(__name__)


def encode_package_name(name: str) -> str:
    """Encode a package name for a registry path (``@scope/pkg`` -> ``@scope%2Fpkg``)."""
    return quote(name, safe="@")


class NpmRegistry:
    """npm registry client backed by a requests session."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        downloads_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._downloads_url = downloads_url.rstrip("/") if downloads_url else None
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_package(self, name: str) -> dict[str, Any]:
        url = f"{self._base_url}/{encode_package_name(name)}"
        debug_logger.debug("GET %s", url)
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise RegistryUnavailableError(name, f"Registry request failed for {name}: {e}") from e

        if not response.ok:
            raise RegistryUnavailableError(name)

        try:
            data = response.json()
        except ValueError as e:
            raise RegistryUnavailableError(name, f"Registry returned invalid JSON for {name}") from e
        if not isinstance(data, dict):
            raise RegistryUnavailableError(name, f"Registry returned unexpected payload for {name}")
        return data

    def fetch_weekly_downloads(self, name: str) -> Optional[int]:
        if not self._downloads_url:
            return None

        url = f"{self._downloads_url}/{encode_package_name(name)}"
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
            downloads = response.json().get("downloads")
        except (requests.RequestException, ValueError, AttributeError) as e:
            debug_logger.warning("Download count unavailable for %s: %s", name, e)
            return None

        if isinstance(downloads, int) and not isinstance(downloads, bool):
            return max(0, downloads)
        return None
