"""Async GitHub REST client.

Thin wrapper over the three endpoints the aggregator needs. Transport
failures and timeouts surface as `UpstreamUnavailableError`; malformed
bodies as `ParseFailureError`.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from devmatch.errors import NotFoundError, ParseFailureError, UpstreamUnavailableError
from devmatch.github.config import GitHubConfig, get_github_config

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/vnd.github+json"


class GitHubClient:
    """Async client for the GitHub user, repository and contributor endpoints."""

    def __init__(
        self,
        config: GitHubConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or get_github_config()
        self._client = httpx.AsyncClient(
            base_url=self.config.api_base_url,
            headers=self._headers(),
            timeout=self.config.timeout,
            transport=transport,
        )

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": self.config.user_agent,
        }
        if self.config.token:
            headers["Authorization"] = f"token {self.config.token}"
        return headers

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            return await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                f"GitHub request failed: {path}: {e}", e
            ) from e

    @staticmethod
    def _json(response: httpx.Response, path: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseFailureError(f"GitHub returned invalid JSON for {path}", e) from e

    async def get_user(self, username: str) -> dict[str, Any]:
        """Fetch a user's profile fields.

        Raises:
            NotFoundError: GitHub has no such user.
            UpstreamUnavailableError: Any other non-success response or transport error.
            ParseFailureError: The body is not a JSON object.
        """
        path = f"/users/{quote(username, safe='')}"
        response = await self._get(path)

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(f"GitHub user '{username}' not found")
        if not response.is_success:
            raise UpstreamUnavailableError(
                f"GitHub API error: {response.status_code}",
                status_code=response.status_code,
            )

        data = self._json(response, path)
        if not isinstance(data, dict):
            raise ParseFailureError(f"Unexpected GitHub user payload for '{username}'")
        return data

    async def get_repositories(
        self, username: str, page: int, per_page: int
    ) -> list[dict[str, Any]]:
        """Fetch one page of a user's public repositories, most recently updated first."""
        path = f"/users/{quote(username, safe='')}/repos"
        response = await self._get(
            path, params={"page": page, "per_page": per_page, "sort": "updated"}
        )
        if not response.is_success:
            raise UpstreamUnavailableError(
                f"GitHub repositories page {page} failed: {response.status_code}",
                status_code=response.status_code,
            )

        data = self._json(response, path)
        if not isinstance(data, list):
            raise ParseFailureError(f"Unexpected repositories payload on page {page}")
        return [item for item in data if isinstance(item, dict)]

    async def get_contributors(self, owner: str, repo: str) -> list[tuple[str, int]]:
        """Return ``(login, contributions)`` pairs for a repository."""
        path = f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contributors"
        response = await self._get(path)

        # Empty repositories answer 204 with no body
        if response.status_code == httpx.codes.NO_CONTENT:
            return []
        if not response.is_success:
            raise UpstreamUnavailableError(
                f"GitHub contributors for {owner}/{repo} failed: {response.status_code}",
                status_code=response.status_code,
            )

        data = self._json(response, path)
        if not isinstance(data, list):
            raise ParseFailureError(f"Unexpected contributors payload for {owner}/{repo}")

        contributors: list[tuple[str, int]] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            login = item.get("login")
            if not login:
                continue
            contributors.append((str(login), int(item.get("contributions") or 0)))
        return contributors
