"""Tests for the GitHub languages client (requests session mocked)."""

from __future__ import annotations

from unittest.mock import MagicMock

from soup_register.github import GitHubClient


def _session(status: int, payload=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.json.return_value = payload
    session = MagicMock()
    session.headers = {}
    session.get.return_value = response
    return session


class TestGitHubClient:
    def test_languages_request(self):
        session = _session(200, {"JavaScript": 100})
        client = GitHubClient("secret", session=session, timeout=7)

        status, data = client.get_languages("stevemao", "left-pad")

        assert (status, data) == (200, {"JavaScript": 100})
        session.get.assert_called_once_with(
            "https://api.github.com/repos/stevemao/left-pad/languages", timeout=7
        )

    def test_token_sent_as_authorization(self):
        session = _session(200, {})
        GitHubClient("secret", session=session)
        assert session.headers["Authorization"] == "token secret"
        assert session.headers["Accept"] == "application/vnd.github+json"

    def test_no_token_unauthenticated(self):
        session = _session(200, {})
        GitHubClient(None, session=session)
        assert "Authorization" not in session.headers

    def test_path_segments_encoded(self):
        session = _session(404, {})
        client = GitHubClient(session=session)
        client.get_languages("o", "r#readme")
        session.get.assert_called_once_with(
            "https://api.github.com/repos/o/r%23readme/languages", timeout=30.0
        )

    def test_custom_base_url(self):
        session = _session(200, {})
        client = GitHubClient(base_url="https://ghe.example.com/api/v3/", session=session)
        client.get_languages("o", "r")
        session.get.assert_called_once_with(
            "https://ghe.example.com/api/v3/repos/o/r/languages", timeout=30.0
        )

    def test_error_status_drops_payload(self):
        client = GitHubClient(session=_session(404, {"message": "Not Found"}))
        assert client.get_languages("o", "missing") == (404, {})

    def test_non_object_payload(self):
        client = GitHubClient(session=_session(200, ["JavaScript"]))
        assert client.get_languages("o", "r") == (200, {})
