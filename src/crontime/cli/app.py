# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError

from crontime.cli.exit_codes import ExitCode, error_to_exit_code
from crontime.core.exceptions import ConfigurationError, CrontimeError

logger = logging.getLogger("crontime.cli")

USAGE = """\
Usage: crontime [--now DATETIME] [--count N] MINUTE HOUR DAY-OF-MONTH MONTH DAY-OF-WEEK

Prints the next time matching the cron fields as a scheduler time argument.
Quote each field so the shell does not expand wildcards, e.g.

    crontime '*/15' '9-17' '*' '*' 'mon-fri'"""

app = typer.Typer(
    name="crontime",
    help="Compute the next time matching a five-field cron expression",
    add_completion=False,
)


def _fail(message: str, code: ExitCode) -> NoReturn:
    typer.echo(USAGE)
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(int(code))


@app.command()
def main(
    fields: Annotated[
        list[str] | None,
        typer.Argument(
            help="MINUTE HOUR DAY-OF-MONTH MONTH DAY-OF-WEEK, each quoted",
            show_default=False,
        ),
    ] = None,
    now: Annotated[
        datetime | None,
        typer.Option(
            "--now",
            formats=["%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"],
            help="Search from this local time instead of the current time",
        ),
    ] = None,
    count: Annotated[
        int,
        typer.Option("--count", "-n", min=1, help="Number of upcoming times to print"),
    ] = 1,
) -> None:
    """Print the next time matching MINUTE HOUR DAY-OF-MONTH MONTH DAY-OF-WEEK."""
    from crontime.core.config import get_settings
    from crontime.core.logging import setup_logging
    from crontime.scheduler.fields import parse_fields
    from crontime.scheduler.search import format_time_argument, upcoming

    try:
        settings = get_settings()
    except ValidationError as exc:
        err = ConfigurationError(f"Invalid configuration: {exc.errors()[0]['msg']}")
        _fail(str(err), error_to_exit_code(err))

    setup_logging(settings.log_level, settings.log_format)

    fields = fields or []
    if len(fields) != 5:
        _fail(f"Expected 5 cron fields, got {len(fields)}", ExitCode.USAGE)

    start = now if now is not None else datetime.now()

    try:
        schedule = parse_fields(fields)
        # Resolve every match before printing so errors never follow output
        matches = list(
            upcoming(schedule, start, count, lookahead_years=settings.lookahead_years)
        )
    except CrontimeError as exc:
        logger.warning("Evaluation of %r failed: %s", " ".join(fields), exc)
        _fail(str(exc), error_to_exit_code(exc))

    if settings.debug:
        for line in schedule.describe():
            typer.echo(line)
    for clock in matches:
        typer.echo(format_time_argument(clock))
