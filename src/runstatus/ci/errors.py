"""Errors raised by the status pipeline.

Upstream API failures are not wrapped; they surface as the ``httpx``
exceptions raised by :class:`~runstatus.ci.github.GitHubClient`.
"""

from __future__ import annotations


class RunStatusError(Exception):
    """Base class for runstatus errors."""


class ConfigurationError(RunStatusError):
    """Raised when the invocation is misconfigured (wrong event, missing input)."""


class JobNotFoundError(RunStatusError):
    """Raised when no job in the run matches the configured job name."""

    def __init__(self, job_name: str) -> None:
        super().__init__(f"job not found: {job_name}")
        self.job_name = job_name
