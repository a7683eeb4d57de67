# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for crontime."""

from __future__ import annotations


class CrontimeError(Exception):
    """Base exception for all crontime errors."""


class ConfigurationError(CrontimeError):
    """Invalid or missing configuration."""


class CronParseError(CrontimeError):
    """A cron field expression could not be parsed.

    ``field`` is the name of the offending field (e.g. ``"month"``) and
    ``term`` the comma-separated unit that failed, when known.
    """

    def __init__(self, message: str, *, field: str | None = None, term: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.term = term


class SearchExhaustedError(CrontimeError):
    """No matching timestamp exists before the lookahead bound."""

    def __init__(self, message: str, *, bound_year: int) -> None:
        super().__init__(message)
        self.bound_year = bound_year
