# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""crontime - next-run calculator for five-field cron expressions."""

__version__ = "0.1.0"

from crontime.core.exceptions import CronParseError, CrontimeError, SearchExhaustedError
from crontime.scheduler.clock import ClockState
from crontime.scheduler.fields import CronSchedule, expand_field, parse_cron, parse_fields
from crontime.scheduler.search import format_time_argument, next_run, next_run_from_cron, upcoming

__all__ = [
    "ClockState",
    "CronParseError",
    "CronSchedule",
    "CrontimeError",
    "SearchExhaustedError",
    "__version__",
    "expand_field",
    "format_time_argument",
    "next_run",
    "next_run_from_cron",
    "parse_cron",
    "parse_fields",
    "upcoming",
]
