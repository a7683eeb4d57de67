# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Process exit codes for the crontime command.

Exit codes:
    0 — OK: a matching time was printed
    1 — USAGE: wrong number of positional fields
    2 — INVALID_EXPRESSION: a cron field could not be parsed
    3 — SEARCH_EXHAUSTED: nothing matches within the lookahead bound
    4 — CONFIG_ERROR: invalid CRONTIME_* settings
"""

from __future__ import annotations

from enum import IntEnum

from crontime.core.exceptions import (
    ConfigurationError,
    CronParseError,
    CrontimeError,
    SearchExhaustedError,
)


class ExitCode(IntEnum):
    """Exit codes returned by the crontime command."""

    OK = 0
    USAGE = 1
    INVALID_EXPRESSION = 2
    SEARCH_EXHAUSTED = 3
    CONFIG_ERROR = 4


_ERROR_MAP: dict[type[CrontimeError], ExitCode] = {
    CronParseError: ExitCode.INVALID_EXPRESSION,
    SearchExhaustedError: ExitCode.SEARCH_EXHAUSTED,
    ConfigurationError: ExitCode.CONFIG_ERROR,
}


def error_to_exit_code(exc: CrontimeError) -> ExitCode:
    """Map a crontime exception to its exit code; unknown kinds are usage errors."""
    for error_type, code in _ERROR_MAP.items():
        if isinstance(exc, error_type):
            return code
    return ExitCode.USAGE
