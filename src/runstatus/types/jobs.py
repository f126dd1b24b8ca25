"""Job and step records as returned by the GitHub Actions jobs API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class StepRecord:
    """One ordered step of a job.

    ``conclusion`` and ``completed_at`` are ``None`` while the step is running.
    """

    name: str
    status: str
    conclusion: str | None
    number: int
    started_at: str | None = None
    completed_at: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> StepRecord:
        return cls(
            name=data.get("name", ""),
            status=data.get("status", ""),
            conclusion=data.get("conclusion"),
            number=int(data.get("number", 0)),
            started_at=data.get("started_at"),
            completed_at=data.get("completed_at"),
        )


@dataclass(frozen=True, slots=True)
class JobRecord:
    """One job execution within a workflow run."""

    id: int
    run_id: int
    name: str
    status: str
    conclusion: str | None
    html_url: str
    started_at: str | None = None
    completed_at: str | None = None
    steps: tuple[StepRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> JobRecord:
        return cls(
            id=int(data["id"]),
            run_id=int(data["run_id"]),
            name=data.get("name", ""),
            status=data.get("status", ""),
            conclusion=data.get("conclusion"),
            html_url=data.get("html_url", ""),
            started_at=data.get("started_at"),
            completed_at=data.get("completed_at"),
            steps=tuple(StepRecord.from_api(s) for s in data.get("steps") or ()),
        )

    def step_snapshot(self) -> tuple[tuple[int, str, str | None], ...]:
        """(number, status, conclusion) per step, for comparing two fetches."""
        return tuple((s.number, s.status, s.conclusion) for s in self.steps)
