# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cron field expansion.

Supports standard 5-field cron expressions:
    minute hour day-of-month month day-of-week

Each field is a comma-separated list of terms:
    *           — any value
    */N         — every Nth value of the field's range
    A-B         — range of values (e.g. 1-5, mon-fri)
    A-B/N       — every Nth value within a range (e.g. 0-30/10)
    A           — single value, numeric or name (e.g. 5, jan, fri)

Month and weekday names match case-insensitively on any prefix of at least
three letters.  ``sun`` is 0 on the left of a range and 7 on the right, so
``mon-sun`` covers the whole week.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from crontime.core.constants import (
    FIELD_RANGES,
    FIELD_VOCABULARIES,
    MIN_NAME_PREFIX,
    SUNDAY,
    SUNDAY_ALIAS,
    CronField,
)
from crontime.core.exceptions import CronParseError

_WILDCARD_RE = re.compile(r"^\*(?:/(?P<step>\d+))?$")
_RANGE_RE = re.compile(r"^(?P<start>[A-Za-z0-9]+)-(?P<end>[A-Za-z0-9]+)(?:/(?P<step>\d+))?$")
_VALUE_RE = re.compile(r"^[A-Za-z0-9]+$")

_ALL_DAYS = frozenset(range(1, 32))
_ALL_WEEKDAYS = frozenset(range(SUNDAY, SUNDAY_ALIAS))  # Sunday..Saturday


def resolve_value(cron_field: CronField, token: str, *, end: bool = False) -> int:
    """Resolve a numeric or named token to its integer value.

    Args:
        cron_field: Field the token belongs to; selects the name vocabulary.
        token: Raw token, e.g. ``"5"``, ``"Jan"`` or ``"friday"``.
        end: True when the token is the right side of a range.  Only
            changes how ``sun`` resolves (7 instead of 0).

    Raises:
        CronParseError: If the token is neither a number nor a known name.
    """
    if token.isdigit():
        return int(token)

    lowered = token.lower()
    vocabulary = FIELD_VOCABULARIES.get(cron_field, {})
    if len(lowered) >= MIN_NAME_PREFIX:
        for name, value in vocabulary.items():
            if name.startswith(lowered):
                if end and value == SUNDAY and cron_field is CronField.DAY_OF_WEEK:
                    return SUNDAY_ALIAS
                return value

    raise CronParseError(
        f"Unknown value {token!r} in {cron_field.label} field",
        field=cron_field.label,
        term=token,
    )


def _parse_step(cron_field: CronField, term: str, raw: str | None) -> int:
    if raw is None:
        return 1
    step = int(raw)
    if step <= 0:
        raise CronParseError(
            f"Step must be positive in {cron_field.label} term {term!r}",
            field=cron_field.label,
            term=term,
        )
    return step


def _check_bounds(cron_field: CronField, term: str, *values: int) -> None:
    lo, hi = FIELD_RANGES[cron_field]
    for value in values:
        if value < lo or value > hi:
            raise CronParseError(
                f"Value {value} in {cron_field.label} term {term!r} out of bounds ({lo}-{hi})",
                field=cron_field.label,
                term=term,
            )


def _expand_term(cron_field: CronField, term: str) -> range:
    lo, hi = FIELD_RANGES[cron_field]

    match = _WILDCARD_RE.match(term)
    if match:
        return range(lo, hi + 1, _parse_step(cron_field, term, match["step"]))

    match = _RANGE_RE.match(term)
    if match:
        start = resolve_value(cron_field, match["start"])
        stop = resolve_value(cron_field, match["end"], end=True)
        if stop <= start:
            raise CronParseError(
                f"Invalid range {term!r} in {cron_field.label} field: start must be below end",
                field=cron_field.label,
                term=term,
            )
        _check_bounds(cron_field, term, start, stop)
        return range(start, stop + 1, _parse_step(cron_field, term, match["step"]))

    if _VALUE_RE.match(term):
        value = resolve_value(cron_field, term)
        _check_bounds(cron_field, term, value)
        return range(value, value + 1)

    raise CronParseError(
        f"Invalid term {term!r} in {cron_field.label} field",
        field=cron_field.label,
        term=term,
    )


def expand_field(cron_field: CronField, expression: str) -> tuple[int, ...]:
    """Expand one field's expression into the sorted values it matches.

    Raises:
        CronParseError: If any term is malformed.  No partial result is
            returned.
    """
    values: set[int] = set()
    for part in expression.split(","):
        term = part.strip()
        if not term:
            raise CronParseError(
                f"Empty term in {cron_field.label} field expression {expression!r}",
                field=cron_field.label,
                term=term,
            )
        values.update(_expand_term(cron_field, term))
    return tuple(sorted(values))


@dataclass(frozen=True)
class CronSchedule:
    """The five expanded membership sets of a cron expression."""

    minutes: tuple[int, ...]
    hours: tuple[int, ...]
    days: tuple[int, ...]
    months: tuple[int, ...]
    weekdays: tuple[int, ...]
    _minute_set: frozenset[int] = field(init=False, repr=False, compare=False)
    _hour_set: frozenset[int] = field(init=False, repr=False, compare=False)
    _day_set: frozenset[int] = field(init=False, repr=False, compare=False)
    _month_set: frozenset[int] = field(init=False, repr=False, compare=False)
    _weekday_set: frozenset[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        weekdays = set(self.weekdays)
        if SUNDAY_ALIAS in weekdays:
            weekdays.add(SUNDAY)
        object.__setattr__(self, "_minute_set", frozenset(self.minutes))
        object.__setattr__(self, "_hour_set", frozenset(self.hours))
        object.__setattr__(self, "_day_set", frozenset(self.days))
        object.__setattr__(self, "_month_set", frozenset(self.months))
        object.__setattr__(self, "_weekday_set", frozenset(weekdays))

    @property
    def every_day_of_month(self) -> bool:
        return self._day_set >= _ALL_DAYS

    @property
    def every_day_of_week(self) -> bool:
        return self._weekday_set >= _ALL_WEEKDAYS

    def matches_minute(self, minute: int) -> bool:
        return minute in self._minute_set

    def matches_hour(self, hour: int) -> bool:
        return hour in self._hour_set

    def matches_month(self, month: int) -> bool:
        return month in self._month_set

    def matches_day(self, day: int, weekday: int) -> bool:
        """Combine day-of-month and day-of-week the way cron does.

        ``weekday`` is 0 for Sunday through 6 for Saturday.  When one of the
        two fields matches every day, the other one alone decides; otherwise
        a day matches if either field matches it.
        """
        if self.every_day_of_month:
            return weekday in self._weekday_set
        if self.every_day_of_week:
            return day in self._day_set
        return day in self._day_set or weekday in self._weekday_set

    def by_field(self) -> dict[CronField, tuple[int, ...]]:
        return {
            CronField.MINUTE: self.minutes,
            CronField.HOUR: self.hours,
            CronField.DAY_OF_MONTH: self.days,
            CronField.MONTH: self.months,
            CronField.DAY_OF_WEEK: self.weekdays,
        }

    def describe(self) -> list[str]:
        """One ``"<field>: v1 v2 ..."`` line per field, for debug output."""
        return [
            f"{cron_field.label}: {' '.join(str(v) for v in values)}"
            for cron_field, values in self.by_field().items()
        ]


def parse_fields(fields: Sequence[str]) -> CronSchedule:
    """Expand five separate field expressions into a CronSchedule.

    Raises:
        CronParseError: If there are not exactly five fields or any is malformed.
    """
    if len(fields) != len(CronField):
        raise CronParseError(f"Expected exactly 5 cron fields, got {len(fields)}")
    expanded = [expand_field(cron_field, fields[cron_field]) for cron_field in CronField]
    return CronSchedule(*expanded)


def parse_cron(expression: str) -> CronSchedule:
    """Parse a whitespace-separated 5-field cron expression.

    Raises:
        CronParseError: If the expression is malformed.
    """
    parts = expression.strip().split()
    if len(parts) != len(CronField):
        raise CronParseError(
            f"Cron expression must have exactly 5 fields, got {len(parts)}: {expression!r}"
        )
    return parse_fields(parts)
