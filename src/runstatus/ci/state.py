"""Main/post step state, persisted through $GITHUB_STATE."""

from __future__ import annotations

import logging
import os

from runstatus.types.status import Mode

logger = logging.getLogger(__name__)

IS_POST_STATE = "isPost"


def get_state(name: str) -> str:
    """Read a value saved by the main step (exposed to the post step as STATE_<name>)."""
    return os.environ.get(f"STATE_{name}", "")


def save_state(name: str, value: str) -> None:
    """Save a value for the post step by appending to $GITHUB_STATE."""
    state_file = os.environ.get("GITHUB_STATE")
    if not state_file:
        logger.warning("GITHUB_STATE env var not set, can't save state %s", name)
        return

    with open(state_file, "a") as f:
        f.write(f"{name}={value}\n")


def detect_mode() -> Mode:
    """Finish when running as the post step, otherwise start.

    The main step records ``isPost`` so the post step of the same action can
    tell itself apart.
    """
    if get_state(IS_POST_STATE):
        return Mode.FINISH
    save_state(IS_POST_STATE, "true")
    return Mode.START
