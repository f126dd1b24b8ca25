"""Reporter entry points: resolve a status and publish it."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from runstatus.ci.config import ActionInputs, load_inputs
from runstatus.ci.context import load_context, validate_context
from runstatus.ci.github import GitHubClient, GitHubConfig, resolve_api_url
from runstatus.ci.jobs import fetch_job
from runstatus.ci.reporter import StatusPublisher
from runstatus.ci.status import derive_status
from runstatus.ci.workflow_commands import log_group
from runstatus.types.context import InvocationContext
from runstatus.types.status import CommitStatus, Mode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportOutcome:
    """Result of one reporter invocation."""

    mode: Mode
    status: CommitStatus | None = None
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        """True when the invocation must fail its host step."""
        return self.error is not None and self.mode is Mode.START


async def resolve_status(
    mode: Mode,
    *,
    context: InvocationContext | None = None,
    inputs: ActionInputs | None = None,
    client: GitHubClient | None = None,
    overrides: dict[str, Any] | None = None,
) -> CommitStatus:
    """Validate, fetch, derive and publish the status for the current job.

    Every error propagates to the caller unchanged.
    """
    if context is None:
        context = load_context()

    if logger.isEnabledFor(logging.DEBUG):
        with log_group("github.context:"):
            logger.debug(json.dumps(context.to_dict(), indent=2))

    validate_context(context)

    if inputs is None:
        inputs = load_inputs(**(overrides or {}))

    if client is None:
        config = GitHubConfig(
            token=inputs.github_token,
            repository=context.repository,
            api_url=resolve_api_url(),
        )
        async with GitHubClient(config) as gh:
            return await _resolve_with_client(mode, context, inputs, gh)
    return await _resolve_with_client(mode, context, inputs, client)


async def _resolve_with_client(
    mode: Mode,
    context: InvocationContext,
    inputs: ActionInputs,
    client: GitHubClient,
) -> CommitStatus:
    settle = inputs.settle if mode is Mode.FINISH else None
    job = await fetch_job(client, context, inputs.job_id, settle=settle)

    state = derive_status(
        job,
        mode,
        action=context.action,
        requested_as_pending=inputs.requested_as_pending,
    )

    publisher = StatusPublisher(client)
    return await publisher.publish(publisher.build(context, inputs.job_id, job, state))


async def report(
    mode: Mode,
    *,
    context: InvocationContext | None = None,
    inputs: ActionInputs | None = None,
    client: GitHubClient | None = None,
    overrides: dict[str, Any] | None = None,
) -> ReportOutcome:
    """Run the reporter for ``mode``.

    Start failures are logged as errors and mark the outcome failed. Finish
    failures are logged as warnings only: the finish reporter runs during
    cleanup and must not fail the job it reports on.
    """
    try:
        status = await resolve_status(
            mode, context=context, inputs=inputs, client=client, overrides=overrides,
        )
    except Exception as e:
        if mode is Mode.START:
            logger.error("%s", e)
        else:
            logger.warning("%s", e)
        return ReportOutcome(mode=mode, error=e)

    return ReportOutcome(mode=mode, status=status)
