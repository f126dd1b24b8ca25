"""Action input loading (INPUT_* env vars, .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

from runstatus.ci.errors import ConfigurationError

DEFAULT_PROPAGATION_DELAY = 10.0
DEFAULT_SETTLE_INTERVAL = 5.0


@dataclass(frozen=True, slots=True)
class SettlePolicy:
    """How the finish reporter waits for step data to reach the API.

    ``delay`` is always slept once before the first fetch. With
    ``attempts > 1`` the job is re-fetched every ``interval`` seconds until
    two consecutive fetches report the same steps, or attempts run out.
    """

    delay: float = DEFAULT_PROPAGATION_DELAY
    attempts: int = 1
    interval: float = DEFAULT_SETTLE_INTERVAL


@dataclass(frozen=True, slots=True)
class ActionInputs:
    """Inputs for a single reporter invocation."""

    job_id: str
    github_token: str
    requested_as_pending: bool = False
    settle: SettlePolicy = SettlePolicy()


def get_input(name: str, *, required: bool = False) -> str:
    """Read an action input the way the runner exports it (INPUT_<NAME>)."""
    key = "INPUT_" + name.replace(" ", "_").upper()
    value = os.environ.get(key, "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


def get_bool_input(name: str, default: bool = False) -> bool:
    """Boolean input; only a case-insensitive ``true`` enables it."""
    value = get_input(name)
    if not value:
        return default
    return value.upper() == "TRUE"


def _number_input(name: str, default: float, cast: type) -> Any:
    value = get_input(name)
    if not value:
        return default
    try:
        result = cast(value)
    except ValueError:
        raise ConfigurationError(f"Input {name} must be a number, got {value!r}") from None
    if result < 0:
        raise ConfigurationError(f"Input {name} must not be negative, got {value!r}")
    return result


def load_inputs(**overrides: Any) -> ActionInputs:
    """Load action inputs from the environment.

    Keyword overrides (from CLI options) win over environment values when
    they are not ``None``.
    """
    # Local runs: pick up a .env file, won't override existing env vars
    load_dotenv()

    job_id = overrides.get("job_id") or get_input("job_id", required=True)
    token = (
        overrides.get("github_token")
        or get_input("github_token")
        or os.environ.get("GITHUB_TOKEN", "")
    )
    if not token:
        raise ConfigurationError("Input required and not supplied: github_token")

    requested_as_pending = overrides.get("requested_as_pending")
    if requested_as_pending is None:
        requested_as_pending = get_bool_input("requested_as_pending")

    delay = overrides.get("propagation_delay")
    if delay is None:
        delay = _number_input("propagation_delay", DEFAULT_PROPAGATION_DELAY, float)

    attempts = _number_input("settle_attempts", 1, int)
    interval = _number_input("settle_interval", DEFAULT_SETTLE_INTERVAL, float)

    return ActionInputs(
        job_id=job_id,
        github_token=token,
        requested_as_pending=requested_as_pending,
        settle=SettlePolicy(delay=delay, attempts=max(1, attempts), interval=interval),
    )


def is_debug() -> bool:
    """Whether the runner has step debug logging enabled."""
    return (
        os.environ.get("RUNNER_DEBUG", "") == "1"
        or os.environ.get("ACTIONS_STEP_DEBUG", "").lower() == "true"
    )
