"""runstatus — commit statuses for jobs triggered by workflow_run.

Usage:
    import asyncio
    import runstatus

    outcome = asyncio.run(runstatus.report(runstatus.Mode.FINISH))
    if outcome.status is not None:
        print(outcome.status.state.value)
"""

from runstatus.ci.errors import ConfigurationError, JobNotFoundError, RunStatusError
from runstatus.ci.runner import ReportOutcome, report, resolve_status
from runstatus.ci.status import derive_status
from runstatus.types.context import InvocationContext
from runstatus.types.jobs import JobRecord, StepRecord
from runstatus.types.status import CommitStatus, Mode, Status

__version__ = "0.1.0"

__all__ = [
    # Core API
    "derive_status",
    "report",
    "resolve_status",
    "ReportOutcome",
    # Types
    "CommitStatus",
    "InvocationContext",
    "JobRecord",
    "Mode",
    "Status",
    "StepRecord",
    # Errors
    "ConfigurationError",
    "JobNotFoundError",
    "RunStatusError",
]
