from __future__ import annotations

import re

from .exceptions import InvalidRepositoryUrlError
from .models import GitHubRepository


_GITHUB_URL = re.compile(r"github\.com[/:]([^/\s]+)/([^/\s#?]+)")


def parse_github_url(url: str) -> GitHubRepository:
    """Parse a GitHub repository reference into owner/name.

    Accepts:
    - "https://github.com/owner/name[.git][/tree/...]"
    - "git@github.com:owner/name[.git]"
    """
    match = _GITHUB_URL.search(url or "")
    if not match:
        raise InvalidRepositoryUrlError(url)
    owner, name = match.groups()
    if name.endswith(".git"):
        name = name[:-4]
    if not name:
        raise InvalidRepositoryUrlError(url)
    return GitHubRepository(owner=owner, name=name)
