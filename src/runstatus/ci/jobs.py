"""Job record fetching for the current workflow run."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable

from runstatus.ci.config import SettlePolicy
from runstatus.ci.errors import JobNotFoundError
from runstatus.ci.github import GitHubClient
from runstatus.ci.workflow_commands import log_group
from runstatus.types.context import InvocationContext
from runstatus.types.jobs import JobRecord

logger = logging.getLogger(__name__)

JOBS_PER_PAGE = 100


def find_job(jobs: Iterable[JobRecord], job_name: str) -> JobRecord:
    """Return the first job whose name equals ``job_name`` exactly."""
    for job in jobs:
        if job.name == job_name:
            return job
    raise JobNotFoundError(job_name)


async def list_jobs(client: GitHubClient, context: InvocationContext) -> list[JobRecord]:
    """Fetch the jobs of the latest attempt of the current run."""
    data = await client.list_jobs_for_workflow_run(
        context.run_id, filter="latest", per_page=JOBS_PER_PAGE,
    )

    if logger.isEnabledFor(logging.DEBUG):
        with log_group("jobs:"):
            logger.debug(json.dumps(data, indent=2))

    return [JobRecord.from_api(j) for j in data.get("jobs") or []]


async def fetch_job(
    client: GitHubClient,
    context: InvocationContext,
    job_name: str,
    *,
    settle: SettlePolicy | None = None,
) -> JobRecord:
    """Fetch the record of ``job_name`` in the current run.

    With a ``settle`` policy (finish mode) the fetch waits ``settle.delay``
    seconds first, so that steps completed just before this one have
    propagated to the jobs API. If ``settle.attempts > 1`` the job is then
    re-fetched until two consecutive fetches report the same steps.
    """
    if settle is None:
        return find_job(await list_jobs(client, context), job_name)

    logger.info(
        "Waiting %g secs to wait for other steps job completion are "
        "propagated to GitHub API response.",
        settle.delay,
    )
    await asyncio.sleep(settle.delay)

    job = find_job(await list_jobs(client, context), job_name)
    for attempt in range(2, settle.attempts + 1):
        await asyncio.sleep(settle.interval)
        latest = find_job(await list_jobs(client, context), job_name)
        if latest.step_snapshot() == job.step_snapshot():
            logger.debug("Steps of %s settled after %d fetches", job_name, attempt)
            return latest
        job = latest

    return job
