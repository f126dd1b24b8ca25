"""Test fixtures including MockGitHubClient for deterministic testing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from runstatus.ci.config import ActionInputs, SettlePolicy
from runstatus.types.context import InvocationContext


def make_step(
    number: int,
    conclusion: str | None = "success",
    *,
    status: str = "completed",
    name: str | None = None,
) -> dict[str, Any]:
    """A step as returned by the jobs API."""
    return {
        "name": name or f"step {number}",
        "status": status,
        "conclusion": conclusion,
        "number": number,
        "started_at": "2026-10-17T10:00:00Z",
        "completed_at": "2026-10-17T10:01:00Z" if conclusion else None,
    }


def make_job(
    name: str = "build",
    steps: list[dict[str, Any]] | None = None,
    *,
    job_id: int = 1,
    conclusion: str | None = None,
) -> dict[str, Any]:
    """A job as returned by the jobs API. Unfinished by default."""
    return {
        "id": job_id,
        "run_id": 1234,
        "node_id": f"CR_{job_id}",
        "head_sha": "0" * 40,
        "name": name,
        "status": "completed" if conclusion else "in_progress",
        "conclusion": conclusion,
        "started_at": "2026-10-17T10:00:00Z",
        "completed_at": None,
        "html_url": f"https://github.com/owner/repo/actions/runs/1234/job/{job_id}",
        "steps": steps if steps is not None else [],
    }


class MockGitHubClient:
    """A scripted stand-in for GitHubClient.

    Each call to ``list_jobs_for_workflow_run`` returns the next scripted
    response (the last one repeats). Published statuses are recorded.

    Usage:
        client = MockGitHubClient(responses=[{"total_count": 1, "jobs": [make_job()]}])
    """

    def __init__(
        self,
        responses: list[dict[str, Any]] | None = None,
        *,
        list_error: Exception | None = None,
        status_error: Exception | None = None,
    ) -> None:
        self._responses = list(responses or [{"total_count": 0, "jobs": []}])
        self._list_error = list_error
        self._status_error = status_error
        self.list_calls: list[dict[str, Any]] = []
        self.statuses: list[dict[str, Any]] = []

    async def __aenter__(self) -> MockGitHubClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        pass

    async def list_jobs_for_workflow_run(
        self, run_id: int, *, filter: str = "latest", per_page: int = 100,
    ) -> dict[str, Any]:
        self.list_calls.append({"run_id": run_id, "filter": filter, "per_page": per_page})
        if self._list_error is not None:
            raise self._list_error
        index = min(len(self.list_calls) - 1, len(self._responses) - 1)
        return self._responses[index]

    async def create_commit_status(
        self,
        sha: str,
        *,
        state: str,
        context: str,
        target_url: str | None = None,
        description: str | None = None,
    ) -> dict[str, Any]:
        if self._status_error is not None:
            raise self._status_error
        self.statuses.append({
            "sha": sha, "state": state, "context": context, "target_url": target_url,
        })
        return {"id": len(self.statuses), "state": state}


def jobs_response(*jobs: dict[str, Any]) -> dict[str, Any]:
    return {"total_count": len(jobs), "jobs": list(jobs)}


@pytest.fixture
def workflow_run_context() -> InvocationContext:
    """Context of a run triggered by a completed pull_request run."""
    return InvocationContext(
        event_name="workflow_run",
        owner="owner",
        repo="repo",
        run_id=1234,
        action="completed",
        head_sha="abc123",
        workflow="Deploy",
        upstream_event="pull_request",
    )


@pytest.fixture
def action_inputs() -> ActionInputs:
    return ActionInputs(
        job_id="build",
        github_token="ghp_test123",
        settle=SettlePolicy(delay=10.0),
    )


@pytest.fixture
def no_sleep():
    """Patch out the propagation delay; yields the sleep mock."""
    with patch("runstatus.ci.jobs.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def actions_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A GitHub Actions environment for a workflow_run 'completed' event.

    Returns the path of the event payload file.
    """
    for key in ("RUNNER_DEBUG", "ACTIONS_STEP_DEBUG", "STATE_isPost", "GITHUB_TOKEN"):
        monkeypatch.delenv(key, raising=False)

    event_file = tmp_path / "event.json"
    event_file.write_text(json.dumps({
        "action": "completed",
        "workflow_run": {
            "id": 999,
            "event": "pull_request",
            "head_sha": "abc123",
            "head_commit": {"id": "abc123"},
        },
    }))
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "workflow_run")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_file))
    monkeypatch.setenv("GITHUB_REPOSITORY", "owner/repo")
    monkeypatch.setenv("GITHUB_RUN_ID", "1234")
    monkeypatch.setenv("GITHUB_WORKFLOW", "Deploy")
    monkeypatch.setenv("INPUT_JOB_ID", "build")
    monkeypatch.setenv("INPUT_GITHUB_TOKEN", "ghp_test123")
    monkeypatch.setenv("INPUT_REQUESTED_AS_PENDING", "false")
    return event_file
