"""npm registry client and per-dependency SOUP lookup."""

from __future__ import annotations

import re
from typing import Any, Protocol
from urllib.parse import quote

import requests
import structlog

from .github import GitHubLanguages
from .languages import classify_languages
from .models import Outcome, SoupEntry
from .models.outcome import PRIVATE_REPO
from .transport import DEFAULT_TIMEOUT, build_session, http_get

log = structlog.get_logger("soup_register.registry")

NPM_REGISTRY_URL = "https://registry.npmjs.org"

_VERSION_KEY_RE = re.compile(r"[^\d.-]")


class PackageRegistry(Protocol):
    def fetch_package(self, name: str) -> dict[str, Any] | None: ...


class NpmRegistryClient:
    """Fetch package metadata (the "packument") from an npm registry."""

    def __init__(
        self,
        base_url: str = NPM_REGISTRY_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else build_session()
        self._session.headers["Accept"] = "application/json"

    def package_url(self, name: str) -> str:
        # Scoped packages are addressed as @scope%2Fname.
        return f"{self.base_url}/{quote(name, safe='@')}"

    def fetch_package(self, name: str) -> dict[str, Any] | None:
        """Return the decoded package document, or None if it is not a JSON object.

        Transport failures that survive the retries raise requests.RequestException.
        """
        response = http_get(self._session, self.package_url(name), timeout=self.timeout)
        try:
            data = response.json()
        except ValueError:
            log.debug("registry_payload_not_json", package=name, status=response.status_code)
            return None
        return data if isinstance(data, dict) else None

    def close(self) -> None:
        self._session.close()


def version_key(version_range: str) -> str:
    """Reduce a declared range such as ``^1.2.3`` to a registry version key."""
    return _VERSION_KEY_RE.sub("", version_range)


def _repository_url(version_data: dict[str, Any]) -> str | None:
    repository = version_data.get("repository")
    if isinstance(repository, dict):
        url = repository.get("url")
        return url if isinstance(url, str) and url else None
    if isinstance(repository, str) and repository:
        return repository
    return None


def _resolve_site(version_data: dict[str, Any], repo_url: str | None) -> Outcome:
    homepage = version_data.get("homepage")
    if isinstance(homepage, str) and homepage:
        return Outcome.resolved(homepage)
    if repo_url:
        return Outcome.resolved(repo_url)
    return Outcome.unresolved("no homepage or repository url")


def lookup_soup_entry(
    name: str,
    version_range: str,
    *,
    registry: PackageRegistry,
    github: GitHubLanguages,
) -> SoupEntry:
    """Build the SOUP entry for one declared dependency.

    Never raises for network or payload problems: anything that cannot be
    resolved is recorded as an unresolved Outcome so the row is still emitted.
    """
    languages = Outcome.unresolved("no github repository")

    try:
        package = registry.fetch_package(name)
    except requests.RequestException as exc:
        log.warning("registry_request_failed", package=name, error=str(exc))
        package = None

    versions = package.get("versions") if package else None
    if not isinstance(versions, dict):
        site = Outcome.unresolved("package metadata unavailable")
        return SoupEntry(name=name, version=version_range, languages=languages, site=site)

    version_data = versions.get(version_key(version_range))
    if not isinstance(version_data, dict):
        log.debug("registry_version_missing", package=name, version=version_range)
        site = Outcome.unresolved("version not published", sentinel=PRIVATE_REPO)
        return SoupEntry(name=name, version=version_range, languages=languages, site=site)

    repo_url = _repository_url(version_data)
    if repo_url and "github" in repo_url:
        languages = classify_languages(repo_url, github=github)

    site = _resolve_site(version_data, repo_url)
    return SoupEntry(name=name, version=version_range, languages=languages, site=site)


__all__ = [
    "NPM_REGISTRY_URL",
    "NpmRegistryClient",
    "PackageRegistry",
    "lookup_soup_entry",
    "version_key",
]
