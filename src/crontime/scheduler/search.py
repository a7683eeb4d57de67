# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Forward search for the next timestamp matching a cron schedule.

The walk is minute-granular, but whenever a candidate fails it first pushes
every field below the failing one to its maximum, so the next one-minute
step rolls straight over to the next hour, day or month.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from datetime import datetime

from crontime.core.constants import DEFAULT_LOOKAHEAD_YEARS, TIME_ARGUMENT_PREFIX
from crontime.core.exceptions import SearchExhaustedError
from crontime.scheduler.clock import ClockState
from crontime.scheduler.fields import CronSchedule, parse_cron

logger = logging.getLogger("crontime.scheduler.search")


def _matches(schedule: CronSchedule, clock: ClockState) -> bool:
    """Check *clock*, skipping ahead past the first field that fails."""
    if not schedule.matches_month(clock.month):
        clock.end_of_month()
        return False
    if not clock.is_valid_date() or not schedule.matches_day(clock.day, clock.weekday()):
        clock.end_of_day()
        return False
    if not schedule.matches_hour(clock.hour):
        clock.end_of_hour()
        return False
    return schedule.matches_minute(clock.minute)


def _search(schedule: CronSchedule, clock: ClockState, bound_year: int) -> ClockState:
    iterations = 0
    while True:
        if clock.year >= bound_year:
            raise SearchExhaustedError(
                f"No matching time found before {bound_year}-01-01",
                bound_year=bound_year,
            )
        iterations += 1
        if _matches(schedule, clock):
            logger.debug("Matched %s after %d iterations", clock.isoformat(), iterations)
            return clock
        clock.advance()


def next_run(
    schedule: CronSchedule,
    now: datetime,
    *,
    lookahead_years: int = DEFAULT_LOOKAHEAD_YEARS,
) -> ClockState:
    """Find the earliest minute strictly after *now* matching *schedule*.

    Args:
        schedule: Expanded membership sets.
        now: Current wall-clock time; seconds are ignored.
        lookahead_years: The search gives up on reaching January 1st of
            ``now.year + lookahead_years``.

    Raises:
        SearchExhaustedError: If nothing matches within the lookahead bound.
    """
    start = ClockState.after(now)
    logger.debug("Searching from %s (lookahead %d years)", start.isoformat(), lookahead_years)
    return _search(schedule, start, now.year + lookahead_years)


def upcoming(
    schedule: CronSchedule,
    now: datetime,
    count: int,
    *,
    lookahead_years: int = DEFAULT_LOOKAHEAD_YEARS,
) -> Iterator[ClockState]:
    """Yield the next *count* matches, all within the same lookahead bound."""
    bound_year = now.year + lookahead_years
    clock = ClockState.after(now)
    for _ in range(count):
        clock = _search(schedule, clock, bound_year)
        yield replace(clock)
        clock.advance()


def format_time_argument(clock: ClockState) -> str:
    """Render *clock* as a ``--time=YYYY-MM-DDTHH:MM:00`` argument."""
    return f"{TIME_ARGUMENT_PREFIX}{clock.isoformat()}"


def next_run_from_cron(
    expression: str,
    after: datetime,
    *,
    lookahead_years: int = DEFAULT_LOOKAHEAD_YEARS,
) -> datetime:
    """Calculate the next datetime matching a 5-field cron expression.

    The result carries ``after.tzinfo`` unchanged; no conversion is done.

    Raises:
        CronParseError: If the expression is malformed.
        SearchExhaustedError: If no match exists within the lookahead bound.
    """
    schedule = parse_cron(expression)
    clock = next_run(schedule, after, lookahead_years=lookahead_years)
    return clock.to_datetime(after.tzinfo)
