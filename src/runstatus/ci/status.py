"""Status derivation: job record + invocation mode -> commit status state."""

from __future__ import annotations

from runstatus.types.jobs import JobRecord
from runstatus.types.status import Mode, Status

REQUESTED_ACTION = "requested"


def derive_status(
    job: JobRecord,
    mode: Mode,
    *,
    action: str = "",
    requested_as_pending: bool = False,
) -> Status:
    """Decide which state to publish for ``job``.

    Rules, first match wins:

    1. A ``requested`` upstream action with ``requested_as_pending`` set is
       always pending, in either mode.
    2. The start reporter always reports pending.
    3. The finish reporter reports failure if any step concluded with
       ``failure``, else success (an empty step list is success).

    ``job.conclusion`` is deliberately not consulted. The finish reporter is
    itself a step of ``job``, so the job has no conclusion yet while it runs.
    """
    if action == REQUESTED_ACTION and requested_as_pending:
        return Status.PENDING
    if mode is Mode.START:
        return Status.PENDING
    if any(step.conclusion == "failure" for step in job.steps):
        return Status.FAILURE
    return Status.SUCCESS
