"""Minimal GitHub REST client for repository language statistics."""

from __future__ import annotations

from typing import Any, Protocol
from urllib.parse import quote

import requests
import structlog

from .transport import DEFAULT_TIMEOUT, build_session, http_get

log = structlog.get_logger("soup_register.github")

GITHUB_API_URL = "https://api.github.com"


class GitHubLanguages(Protocol):
    def get_languages(self, owner: str, repo: str) -> tuple[int, dict[str, Any]]: ...


class GitHubClient:
    """Thin wrapper around ``GET /repos/{owner}/{repo}/languages``.

    Works without a token, subject to GitHub's lower unauthenticated rate limit.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = GITHUB_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"token {token}"
        self._session = session if session is not None else build_session()
        self._session.headers.update(headers)

    def get_languages(self, owner: str, repo: str) -> tuple[int, dict[str, Any]]:
        """Return (status code, language -> bytes mapping).

        The mapping is empty when the body is not a JSON object. Transport
        failures that survive the retries raise requests.RequestException.
        """
        url = f"{self.base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/languages"
        response = http_get(self._session, url, timeout=self.timeout)
        if response.status_code != 200:
            log.debug(
                "github_languages_status", owner=owner, repo=repo, status=response.status_code
            )
            return response.status_code, {}
        try:
            data = response.json()
        except ValueError:
            return response.status_code, {}
        return response.status_code, data if isinstance(data, dict) else {}

    def close(self) -> None:
        self._session.close()
