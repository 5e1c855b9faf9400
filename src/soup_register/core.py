"""Core register generation entrypoints.

This module MUST NOT depend on the GitHub Actions runtime so it can be used by
both the Action wrapper and the standalone CLI.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import structlog

from .config import DEFAULT_MAX_WORKERS, Settings
from .discovery import discover_manifests
from .errors import RegisterWriteError
from .github import GitHubClient, GitHubLanguages
from .models import Manifest, SoupReport, SoupSection
from .parsers.package_json import read_manifests
from .registry import NpmRegistryClient, PackageRegistry, lookup_soup_entry
from .report import render_register

log = structlog.get_logger("soup_register.core")


def collect_section(
    manifest: Manifest,
    *,
    registry: PackageRegistry,
    github: GitHubLanguages,
    executor: ThreadPoolExecutor,
) -> SoupSection:
    """Look up every dependency of one manifest concurrently.

    Each lookup returns its own entry; results keep declaration order.
    """
    futures = [
        executor.submit(lookup_soup_entry, name, version, registry=registry, github=github)
        for name, version in manifest.dependencies.items()
    ]
    return SoupSection.from_entries(manifest.name, (future.result() for future in futures))


def build_register(
    root: Path,
    *,
    registry: PackageRegistry,
    github: GitHubLanguages,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> SoupReport:
    """Discover manifests under root and resolve SOUP data for each of them.

    Manifests are processed one after another; the dependencies of a single
    manifest are fanned out over a thread pool. Traversal and manifest parse
    errors propagate.
    """
    manifest_paths = discover_manifests(root)
    manifests = read_manifests(manifest_paths)
    log.info(
        "manifests_discovered",
        found=len(manifest_paths),
        with_dependencies=len(manifests),
    )

    report = SoupReport()
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        for manifest in manifests:
            section = collect_section(
                manifest, registry=registry, github=github, executor=executor
            )
            log.debug("manifest_resolved", manifest=manifest.name, entries=len(section.entries))
            report = report.with_section(section)
    return report


def write_register(path: Path, content: str) -> None:
    """Overwrite ``path`` with the rendered register."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RegisterWriteError(f"Failed to write SOUP register to {path}: {exc}") from exc


def generate_register(
    settings: Settings,
    *,
    registry: PackageRegistry | None = None,
    github: GitHubLanguages | None = None,
) -> Path:
    """Generate the register for ``settings.root`` and return the written path.

    Clients default to real npm and GitHub clients built from the settings;
    pass fakes to run without network access. The output file is only written
    once every manifest has been resolved.
    """
    log.info("soup_generation_started", root=str(settings.root))

    owned: list[NpmRegistryClient | GitHubClient] = []
    if registry is None:
        registry = NpmRegistryClient(settings.registry_url, timeout=settings.timeout)
        owned.append(registry)
    if github is None:
        github = GitHubClient(
            settings.token, base_url=settings.github_api_url, timeout=settings.timeout
        )
        owned.append(github)

    try:
        report = build_register(
            settings.root,
            registry=registry,
            github=github,
            max_workers=settings.max_workers,
        )
    finally:
        for client in owned:
            client.close()

    log.info("soup_data_retrieved", **report.totals)

    output_path = settings.output_path
    write_register(output_path, render_register(report.sections))
    log.info("soup_register_written", path=str(output_path))

    log.info("soup_generation_finished")
    return output_path
