# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""ClockState dataclass: the candidate timestamp walked by the scheduler."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo


@dataclass
class ClockState:
    """A candidate (year, month, day, hour, minute) under evaluation.

    ``day`` may transiently exceed the month's length while the search
    rolls forward; ``is_valid_date`` tells such states apart.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int

    @classmethod
    def after(cls, now: datetime) -> ClockState:
        """The first whole minute strictly after *now*."""
        start = now.replace(second=0, microsecond=0) + timedelta(minutes=1)
        return cls(start.year, start.month, start.day, start.hour, start.minute)

    def is_valid_date(self) -> bool:
        return 1 <= self.day <= calendar.monthrange(self.year, self.month)[1]

    def weekday(self) -> int:
        """Day of week with 0 = Sunday, as cron numbers them."""
        return (calendar.weekday(self.year, self.month, self.day) + 1) % 7

    def end_of_hour(self) -> None:
        self.minute = 59

    def end_of_day(self) -> None:
        self.hour = 23
        self.end_of_hour()

    def end_of_month(self) -> None:
        self.day = 31
        self.end_of_day()

    def advance(self) -> None:
        """Step one minute forward.

        Days wrap at 31 regardless of the month; shorter months pass through
        invalid dates which the caller rejects.
        """
        self.minute += 1
        if self.minute < 60:
            return
        self.minute = 0
        self.hour += 1
        if self.hour < 24:
            return
        self.hour = 0
        self.day += 1
        if self.day <= 31:
            return
        self.day = 1
        self.month += 1
        if self.month <= 12:
            return
        self.month = 1
        self.year += 1

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, tzinfo=tz)

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:00"
        )
