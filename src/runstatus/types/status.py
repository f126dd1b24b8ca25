"""Status types for runstatus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Status(Enum):
    """Commit status states this tool can publish."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class Mode(Enum):
    """Lifecycle point the reporter is invoked at."""

    START = "start"  # First step of the job
    FINISH = "finish"  # Last step (or post step) of the job


@dataclass(frozen=True, slots=True)
class CommitStatus:
    """A commit status record to attach to the originating commit."""

    sha: str
    state: Status
    context: str
    target_url: str

    def to_api(self) -> dict[str, str]:
        return {
            "state": self.state.value,
            "context": self.context,
            "target_url": self.target_url,
        }
