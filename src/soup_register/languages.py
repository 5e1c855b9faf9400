"""Classify a repository's implementation languages from GitHub byte counts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests
import structlog

from .github import GitHubLanguages
from .models import Outcome

log = structlog.get_logger("soup_register.languages")

# Languages at or under this share of the repository are tooling noise.
SIGNIFICANT_SHARE_PERCENT = 10


def split_repository_url(repo_url: str) -> tuple[str, str] | None:
    """Return (owner, repo) from a repository URL, or None if it has too few segments.

    Handles the forms npm publishes, e.g. ``git+https://github.com/o/r.git``
    and ``git://github.com/o/r``.
    """
    url = repo_url.strip().split("#", 1)[0]
    if url.endswith(".git"):
        url = url[: -len(".git")]
    parts = url.split("/")
    if len(parts) < 2:
        return None
    owner, repo = parts[-2], parts[-1]
    if not owner or not repo:
        return None
    return owner, repo


def significant_languages(byte_counts: Mapping[str, Any]) -> list[str]:
    """Languages whose share of all bytes is strictly above the threshold, in input order."""
    counts = {
        language: count
        for language, count in byte_counts.items()
        if isinstance(count, (int, float)) and not isinstance(count, bool)
    }
    total = sum(counts.values())
    return [
        language
        for language, count in counts.items()
        if count * 100 > total * SIGNIFICANT_SHARE_PERCENT
    ]


def classify_languages(repo_url: str, *, github: GitHubLanguages) -> Outcome:
    """Return the comma separated significant languages of a GitHub repository."""
    owner_repo = split_repository_url(repo_url)
    if owner_repo is None:
        return Outcome.unresolved("malformed repository url")
    owner, repo = owner_repo

    try:
        status, byte_counts = github.get_languages(owner, repo)
    except requests.RequestException as exc:
        log.warning("github_request_failed", owner=owner, repo=repo, error=str(exc))
        return Outcome.unresolved("github request failed")

    if status != 200:
        return Outcome.unresolved(f"github status {status}")

    return Outcome.resolved(", ".join(significant_languages(byte_counts)))
