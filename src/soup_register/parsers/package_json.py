"""Parse package.json into a Manifest."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from ..errors import ManifestError
from ..models import Manifest


def parse(path: Path) -> Manifest | None:
    """Return the manifest declared in ``path``, or None without dependencies.

    Only the ``dependencies`` section is read. An empty mapping is kept; a
    missing (or null) one means the package has nothing to register. Unreadable
    or malformed files raise ManifestError.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Failed to read manifest {path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in manifest {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} must contain a JSON object")

    dependencies = data.get("dependencies")
    if dependencies is None:
        return None
    if not isinstance(dependencies, dict):
        raise ManifestError(f"Manifest {path} has invalid 'dependencies' (must be an object)")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        name = path.parent.name

    return Manifest(
        name=name,
        dependencies={str(dep): str(version) for dep, version in dependencies.items()},
        path=path,
    )


def read_manifests(paths: Iterable[Path]) -> list[Manifest]:
    """Parse every path, dropping manifests without a dependencies section."""
    manifests: list[Manifest] = []
    for path in paths:
        manifest = parse(path)
        if manifest is not None:
            manifests.append(manifest)
    return manifests
