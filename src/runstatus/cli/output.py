"""Log output setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from runstatus.ci.workflow_commands import WorkflowCommandHandler, running_on_actions


def configure_logging(*, debug: bool = False) -> logging.Handler:
    """Route ``runstatus`` log records to the job log (or a rich console locally).

    Returns the installed handler.
    """
    logger = logging.getLogger("runstatus")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler: logging.Handler
    if running_on_actions():
        handler = WorkflowCommandHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return handler
