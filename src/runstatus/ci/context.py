"""GitHub Actions invocation context loading and validation."""

from __future__ import annotations

import json
import os
from typing import Any

from runstatus.ci.errors import ConfigurationError
from runstatus.types.context import InvocationContext

WORKFLOW_RUN_EVENT = "workflow_run"


def load_context() -> InvocationContext:
    """Build the invocation context from the runner environment.

    Reads GITHUB_EVENT_NAME, GITHUB_REPOSITORY, GITHUB_RUN_ID,
    GITHUB_WORKFLOW and the event payload at GITHUB_EVENT_PATH.
    """
    event_name = os.environ.get("GITHUB_EVENT_NAME", "")
    event_path = os.environ.get("GITHUB_EVENT_PATH", "")

    payload: dict[str, Any] = {}
    if event_path and os.path.exists(event_path):
        with open(event_path) as f:
            payload = json.load(f)

    repository = os.environ.get("GITHUB_REPOSITORY", "")
    owner, _, repo = repository.partition("/")
    if not repo:
        # Fall back to the payload, as the runner does when the var is unset
        repo_data = payload.get("repository") or {}
        owner = (repo_data.get("owner") or {}).get("login", owner)
        repo = repo_data.get("name", "")

    run_id_raw = os.environ.get("GITHUB_RUN_ID", "")
    try:
        run_id = int(run_id_raw) if run_id_raw else 0
    except ValueError:
        raise ConfigurationError(f"GITHUB_RUN_ID is not a number: {run_id_raw!r}") from None

    workflow_run = payload.get("workflow_run") or {}
    head_commit = workflow_run.get("head_commit") or {}

    return InvocationContext(
        event_name=event_name,
        owner=owner,
        repo=repo,
        run_id=run_id,
        action=payload.get("action", ""),
        head_sha=head_commit.get("id", "") or workflow_run.get("head_sha", ""),
        workflow=os.environ.get("GITHUB_WORKFLOW", ""),
        upstream_event=workflow_run.get("event", ""),
        payload=payload,
    )


def validate_context(context: InvocationContext) -> None:
    """Reject anything that was not triggered by a workflow_run event."""
    if context.event_name != WORKFLOW_RUN_EVENT:
        raise ConfigurationError(
            f"This is not workflow_run event: eventName={context.event_name}"
        )
