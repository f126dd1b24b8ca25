"""Public types for runstatus."""

from runstatus.types.context import InvocationContext
from runstatus.types.jobs import JobRecord, StepRecord
from runstatus.types.status import CommitStatus, Mode, Status

__all__ = [
    "CommitStatus",
    "InvocationContext",
    "JobRecord",
    "Mode",
    "Status",
    "StepRecord",
]
