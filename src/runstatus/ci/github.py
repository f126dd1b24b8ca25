"""GitHubClient — httpx-based GitHub API client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """GitHub connection configuration."""

    token: str
    repository: str  # "owner/repo"
    api_url: str = DEFAULT_API_URL


def resolve_api_url() -> str:
    """API base URL; GITHUB_API_URL is set on GitHub Enterprise Server runners."""
    return os.environ.get("GITHUB_API_URL", "") or DEFAULT_API_URL


class GitHubClient:
    """Lightweight GitHub API client using httpx.

    Use as an async context manager to reuse a single connection pool::

        async with GitHubClient(config) as client:
            jobs = await client.list_jobs_for_workflow_run(run_id)
            await client.create_commit_status(sha, state="success", ...)

    Individual methods also work outside the context manager (they create
    a short-lived client per call).
    """

    def __init__(
        self,
        config: GitHubConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._headers = {
            "Authorization": f"Bearer {config.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubClient:
        self._client = self._new_client()
        return self

    async def __aexit__(self, *exc: object) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _new_client(self) -> httpx.AsyncClient:
        if self._transport is not None:
            return httpx.AsyncClient(headers=self._headers, transport=self._transport)
        return httpx.AsyncClient(headers=self._headers)

    def _url(self, path: str) -> str:
        return f"{self._config.api_url}/repos/{self._config.repository}{path}"

    async def _get(self, path: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        url = self._url(path)
        if self._client is not None:
            resp = await self._client.get(url, params=params)
        else:
            async with self._new_client() as c:
                resp = await c.get(url, params=params)
        resp.raise_for_status()
        return resp

    async def _post(self, path: str, json: dict[str, Any]) -> httpx.Response:
        url = self._url(path)
        if self._client is not None:
            resp = await self._client.post(url, json=json)
        else:
            async with self._new_client() as c:
                resp = await c.post(url, json=json)
        resp.raise_for_status()
        return resp

    # -- Public API -------------------------------------------------------

    async def list_jobs_for_workflow_run(
        self,
        run_id: int,
        *,
        filter: str = "latest",
        per_page: int = 100,
    ) -> dict[str, Any]:
        """List jobs for a workflow run (one page)."""
        logger.debug("Listing jobs for run %d of %s", run_id, self._config.repository)
        resp = await self._get(
            f"/actions/runs/{run_id}/jobs",
            params={"filter": filter, "per_page": per_page},
        )
        return resp.json()

    async def create_commit_status(
        self,
        sha: str,
        *,
        state: str,
        context: str,
        target_url: str | None = None,
        description: str | None = None,
    ) -> dict[str, Any]:
        """Create a commit status."""
        data: dict[str, Any] = {"state": state, "context": context}
        if target_url:
            data["target_url"] = target_url
        if description is not None:
            data["description"] = description
        resp = await self._post(f"/statuses/{sha}", json=data)
        return resp.json()
