"""GitHub Actions workflow commands (::debug::, ::group::, ...).

See https://docs.github.com/en/actions/reference/workflow-commands-for-github-actions
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO


def running_on_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "") == "true"


def escape_data(value: str) -> str:
    """Escape a command message the way the runner expects."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: str) -> str:
    return f"::{command}::{escape_data(message)}"


class WorkflowCommandHandler(logging.Handler):
    """Logging handler that renders records as workflow commands.

    DEBUG records only show up in the job log when step debug logging is
    enabled on the runner; WARNING and ERROR become annotations.
    """

    _COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that redirected stdout (tests, CliRunner) is honoured
        return self._stream or sys.stdout

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            command = self._COMMANDS.get(record.levelno)
            line = format_command(command, message) if command else message
            self.stream.write(line + "\n")
            self.stream.flush()
        except Exception:
            self.handleError(record)


@contextmanager
def log_group(title: str, stream: TextIO | None = None) -> Iterator[None]:
    """Fold the lines logged inside the block into a collapsible group."""
    out = stream or sys.stdout
    if not running_on_actions():
        yield
        return
    out.write(f"::group::{title}\n")
    out.flush()
    try:
        yield
    finally:
        out.write("::endgroup::\n")
        out.flush()
