"""StatusPublisher — GitHub commit status creation."""

from __future__ import annotations

import json
import logging

from runstatus.ci.github import GitHubClient
from runstatus.types.context import InvocationContext
from runstatus.types.jobs import JobRecord
from runstatus.types.status import CommitStatus, Status

logger = logging.getLogger(__name__)


def status_context(context: InvocationContext, job_name: str) -> str:
    """Display name of the status, e.g. ``CI / test (pull_request => workflow_run)``."""
    return (
        f"{context.workflow} / {job_name} "
        f"({context.upstream_event} => {context.event_name})"
    )


class StatusPublisher:
    """Publishes one commit status per invocation."""

    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    def build(
        self,
        context: InvocationContext,
        job_name: str,
        job: JobRecord,
        state: Status,
    ) -> CommitStatus:
        return CommitStatus(
            sha=context.head_sha,
            state=state,
            context=status_context(context, job_name),
            target_url=job.html_url,
        )

    async def publish(self, status: CommitStatus) -> CommitStatus:
        """Create the commit status. Errors propagate; nothing is retried."""
        logger.info(
            "Setting %s status on %s: %s", status.state.value, status.sha, status.context,
        )
        resp = await self._client.create_commit_status(status.sha, **status.to_api())
        logger.debug(json.dumps(resp, indent=2))
        return status
