"""Extract the dependency mapping from a package.json document."""

from __future__ import annotations

import json
from typing import Any

from .exceptions import MalformedManifestError, NoDependenciesError


# Later sections override earlier ones on name collision
DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


def load_manifest(text: str | bytes) -> dict[str, Any]:
    """Decode manifest JSON, raising MalformedManifestError on bad input."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedManifestError(f"package.json is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedManifestError("package.json must contain a JSON object")
    return data


def extract_dependencies(manifest: dict[str, Any]) -> dict[str, str]:
    """Merge runtime and development dependencies into one name -> version mapping.

    Raises:
        MalformedManifestError: If a section is not an object
        NoDependenciesError: If no dependencies are declared at all
    """
    if not isinstance(manifest, dict):
        raise MalformedManifestError("package.json must contain a JSON object")

    merged: dict[str, str] = {}
    for section in DEPENDENCY_SECTIONS:
        deps = manifest.get(section)
        if deps is None:
            continue
        if not isinstance(deps, dict):
            raise MalformedManifestError(f"'{section}' must be an object mapping names to versions")
        for name, version in deps.items():
            merged[str(name)] = str(version)

    if not merged:
        raise NoDependenciesError("No dependencies found in package.json")
    return merged
