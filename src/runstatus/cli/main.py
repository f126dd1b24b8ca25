"""CLI entry point for runstatus."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import click

from runstatus.types.status import Mode


def _reporter_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every reporter command (override INPUT_* values)."""
    options = [
        click.option("--job-id", default=None, help="Job name to report on (INPUT_JOB_ID)"),
        click.option("--token", default=None, help="GitHub token (INPUT_GITHUB_TOKEN)"),
        click.option(
            "--requested-as-pending/--no-requested-as-pending",
            default=None,
            help="Report pending for 'requested' workflow_run events",
        ),
        click.option(
            "--delay",
            type=float,
            default=None,
            help="Seconds to wait before fetching jobs in finish mode",
        ),
        click.option("--debug", is_flag=True, help="Dump context and jobs (also RUNNER_DEBUG=1)"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


@click.group()
@click.version_option(package_name="runstatus")
def cli() -> None:
    """Report commit statuses for jobs triggered by workflow_run.

    \b
    Usage:
      runstatus start      (first step of the job: always pending)
      runstatus finish     (last step / post step: success or failure)
      runstatus run        (main + post step of one action: picks the mode)
    """


@cli.command("start")
@_reporter_options
def start_cmd(**options: Any) -> None:
    """Publish a pending status for the current job."""
    _report(Mode.START, **options)


@cli.command("finish")
@_reporter_options
def finish_cmd(**options: Any) -> None:
    """Publish success or failure from the job's completed steps."""
    _report(Mode.FINISH, **options)


@cli.command("run")
@_reporter_options
def run_cmd(**options: Any) -> None:
    """Start on the main step, finish on the post step (via $GITHUB_STATE)."""
    from runstatus.ci.config import is_debug
    from runstatus.ci.state import detect_mode
    from runstatus.cli.output import configure_logging

    configure_logging(debug=options["debug"] or is_debug())
    _report(detect_mode(), **options)


def _report(
    mode: Mode,
    *,
    job_id: str | None,
    token: str | None,
    requested_as_pending: bool | None,
    delay: float | None,
    debug: bool,
) -> None:
    from runstatus.ci.config import is_debug
    from runstatus.ci.runner import report
    from runstatus.cli.output import configure_logging

    configure_logging(debug=debug or is_debug())

    outcome = asyncio.run(report(
        mode,
        overrides={
            "job_id": job_id,
            "github_token": token,
            "requested_as_pending": requested_as_pending,
            "propagation_delay": delay,
        },
    ))

    if outcome.failed:
        raise SystemExit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
