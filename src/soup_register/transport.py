"""Shared HTTP plumbing for the registry and GitHub clients."""

from __future__ import annotations

from collections.abc import Mapping

import requests
from requests import Response
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

USER_AGENT = "soup-register"
DEFAULT_TIMEOUT = 30.0


def build_session(headers: Mapping[str, str] | None = None) -> requests.Session:
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    if headers:
        session.headers.update(headers)
    return session


@retry(
    reraise=True,
    stop=stop_after_attempt(3),
    wait=wait_fixed(2),
    retry=retry_if_exception_type(requests.RequestException),
)
def http_get(session: requests.Session, url: str, timeout: float = DEFAULT_TIMEOUT) -> Response:
    """GET ``url``, retrying transport failures. HTTP error statuses are returned."""
    return session.get(url, timeout=timeout)
