# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cron field enumeration, valid ranges, and name vocabularies."""

from __future__ import annotations

from enum import IntEnum


class CronField(IntEnum):
    """Position of each field in a five-field cron expression."""

    MINUTE = 0
    HOUR = 1
    DAY_OF_MONTH = 2
    MONTH = 3
    DAY_OF_WEEK = 4

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# Inclusive (min, max) per field
FIELD_RANGES: dict[CronField, tuple[int, int]] = {
    CronField.MINUTE: (0, 59),
    CronField.HOUR: (0, 23),
    CronField.DAY_OF_MONTH: (1, 31),
    CronField.MONTH: (1, 12),
    CronField.DAY_OF_WEEK: (0, 7),  # 0 and 7 are both Sunday
}

MONTH_NAMES: tuple[str, ...] = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

WEEKDAY_NAMES: tuple[str, ...] = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
)

# Full name -> cron integer, per field
FIELD_VOCABULARIES: dict[CronField, dict[str, int]] = {
    CronField.MONTH: {name: i for i, name in enumerate(MONTH_NAMES, start=1)},
    CronField.DAY_OF_WEEK: {name: i for i, name in enumerate(WEEKDAY_NAMES)},
}

# Shortest accepted name prefix ("jan", "mon", ...)
MIN_NAME_PREFIX = 3

SUNDAY = 0
SUNDAY_ALIAS = 7

DEFAULT_LOOKAHEAD_YEARS = 2
TIME_ARGUMENT_PREFIX = "--time="
