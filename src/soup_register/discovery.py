"""Manifest discovery utilities."""

from __future__ import annotations

from pathlib import Path

MANIFEST_FILENAME = "package.json"
DEPENDENCY_CACHE_DIR = "node_modules"


def _should_skip(relative: Path) -> bool:
    """Skip dependency caches and hidden folders such as .git or .github."""
    if DEPENDENCY_CACHE_DIR in str(relative):
        return True
    return any(part.startswith(".") for part in relative.parts)


def discover_manifests(root: Path, filename: str = MANIFEST_FILENAME) -> list[Path]:
    """Find manifest files recursively under root, depth first.

    Entries are visited in directory listing order and the result is not sorted.
    Symlinked directories are not followed. Errors while listing a directory
    (including a missing root) propagate to the caller.
    """
    root = root.resolve()
    found: list[Path] = []

    def walk(directory: Path) -> None:
        for path in directory.iterdir():
            if path.is_dir() and not path.is_symlink():
                if _should_skip(path.relative_to(root)):
                    continue
                walk(path)
            elif path.name == filename:
                found.append(path)

    walk(root)
    return found
