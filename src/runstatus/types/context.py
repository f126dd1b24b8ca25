"""Invocation context types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Snapshot of the event that triggered this workflow run.

    ``upstream_event`` is the event of the run that triggered this one
    (``workflow_run.event`` in the payload), e.g. ``pull_request``.
    """

    event_name: str
    owner: str
    repo: str
    run_id: int
    action: str
    head_sha: str
    workflow: str
    upstream_event: str
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_name": self.event_name,
            "repository": self.repository,
            "run_id": self.run_id,
            "action": self.action,
            "head_sha": self.head_sha,
            "workflow": self.workflow,
            "upstream_event": self.upstream_event,
            "payload": self.payload,
        }
