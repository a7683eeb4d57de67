# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for cron field expansion and name resolution."""

from __future__ import annotations

import pytest

from crontime.core.constants import FIELD_RANGES, CronField
from crontime.core.exceptions import CronParseError
from crontime.scheduler.fields import expand_field, parse_cron, parse_fields, resolve_value

# =========================================================================
# Term forms
# =========================================================================


class TestWildcards:
    """'*' and '*/N' span the whole field range."""

    @pytest.mark.parametrize("cron_field", list(CronField))
    def test_star_is_full_range(self, cron_field: CronField):
        lo, hi = FIELD_RANGES[cron_field]
        assert expand_field(cron_field, "*") == tuple(range(lo, hi + 1))

    def test_step_minutes(self):
        assert expand_field(CronField.MINUTE, "*/15") == (0, 15, 30, 45)

    def test_step_hours(self):
        assert expand_field(CronField.HOUR, "*/7") == (0, 7, 14, 21)

    def test_step_starts_at_range_minimum(self):
        """Day-of-month starts at 1, so */10 gives 1, 11, 21, 31."""
        assert expand_field(CronField.DAY_OF_MONTH, "*/10") == (1, 11, 21, 31)

    def test_step_one_is_star(self):
        assert expand_field(CronField.MONTH, "*/1") == expand_field(CronField.MONTH, "*")


class TestRanges:
    """'A-B' and 'A-B/N' terms."""

    def test_numeric_range(self):
        assert expand_field(CronField.HOUR, "9-17") == tuple(range(9, 18))

    def test_stepped_range(self):
        assert expand_field(CronField.MINUTE, "0-30/10") == (0, 10, 20, 30)

    def test_weekday_names(self):
        assert expand_field(CronField.DAY_OF_WEEK, "mon-fri") == (1, 2, 3, 4, 5)

    def test_sun_on_left_is_zero(self):
        assert expand_field(CronField.DAY_OF_WEEK, "sun-sat") == (0, 1, 2, 3, 4, 5, 6)

    def test_sun_on_right_is_seven(self):
        assert expand_field(CronField.DAY_OF_WEEK, "mon-sun") == (1, 2, 3, 4, 5, 6, 7)
        assert expand_field(CronField.DAY_OF_WEEK, "sat-sun") == (6, 7)

    def test_month_names_case_insensitive(self):
        assert expand_field(CronField.MONTH, "Jan-MAR") == (1, 2, 3)

    def test_stepped_named_range(self):
        assert expand_field(CronField.DAY_OF_WEEK, "mon-fri/2") == (1, 3, 5)


class TestValuesAndLists:
    """Single values and comma-separated lists."""

    def test_single_number(self):
        assert expand_field(CronField.MINUTE, "30") == (30,)

    def test_list_is_sorted_and_deduplicated(self):
        assert expand_field(CronField.DAY_OF_MONTH, "15,1,15") == (1, 15)

    def test_overlapping_terms_union(self):
        assert expand_field(CronField.HOUR, "1-5,3-7") == tuple(range(1, 8))

    def test_mixed_term_kinds(self):
        assert expand_field(CronField.MINUTE, "5,*/20,50-52") == (0, 5, 20, 40, 50, 51, 52)

    def test_whitespace_around_terms(self):
        assert expand_field(CronField.MINUTE, " 1 , 2 ") == (1, 2)

    def test_weekday_seven(self):
        assert expand_field(CronField.DAY_OF_WEEK, "7") == (7,)

    def test_single_sun_is_zero(self):
        assert expand_field(CronField.DAY_OF_WEEK, "sun") == (0,)


# =========================================================================
# Name resolution
# =========================================================================


class TestResolveValue:
    """Tests for numeric/name token resolution."""

    def test_numeric_passthrough(self):
        assert resolve_value(CronField.MINUTE, "42") == 42

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("jan", 1), ("JUNE", 6), ("sept", 9), ("may", 5), ("December", 12)],
    )
    def test_month_prefixes(self, token: str, expected: int):
        assert resolve_value(CronField.MONTH, token) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("mon", 1), ("Monday", 1), ("thu", 4), ("SAT", 6)],
    )
    def test_weekday_prefixes(self, token: str, expected: int):
        assert resolve_value(CronField.DAY_OF_WEEK, token) == expected

    def test_sun_start_and_end(self):
        assert resolve_value(CronField.DAY_OF_WEEK, "sun") == 0
        assert resolve_value(CronField.DAY_OF_WEEK, "sun", end=True) == 7

    def test_prefix_too_short(self):
        with pytest.raises(CronParseError, match="Unknown value"):
            resolve_value(CronField.DAY_OF_WEEK, "mo")

    def test_names_only_in_their_field(self):
        with pytest.raises(CronParseError, match="Unknown value"):
            resolve_value(CronField.DAY_OF_MONTH, "mon")
        with pytest.raises(CronParseError, match="Unknown value"):
            resolve_value(CronField.DAY_OF_WEEK, "jan")

    def test_not_a_prefix(self):
        with pytest.raises(CronParseError, match="Unknown value"):
            resolve_value(CronField.MONTH, "janx")


# =========================================================================
# Rejection
# =========================================================================


class TestInvalidTerms:
    """Malformed terms are rejected with CronParseError."""

    def test_reversed_month_range(self):
        with pytest.raises(CronParseError, match="Invalid range") as exc_info:
            expand_field(CronField.MONTH, "13-5")
        assert exc_info.value.field == "month"
        assert exc_info.value.term == "13-5"

    def test_equal_range_bounds(self):
        with pytest.raises(CronParseError, match="Invalid range"):
            expand_field(CronField.HOUR, "5-5")

    def test_reversed_named_range(self):
        with pytest.raises(CronParseError, match="Invalid range"):
            expand_field(CronField.DAY_OF_WEEK, "sat-mon")

    def test_out_of_bounds_value(self):
        with pytest.raises(CronParseError, match="out of bounds"):
            expand_field(CronField.MINUTE, "60")

    def test_out_of_bounds_range(self):
        with pytest.raises(CronParseError, match="out of bounds"):
            expand_field(CronField.DAY_OF_MONTH, "0-5")

    def test_zero_step(self):
        with pytest.raises(CronParseError, match="Step must be positive"):
            expand_field(CronField.MINUTE, "*/0")

    def test_step_on_single_value(self):
        with pytest.raises(CronParseError, match="Invalid term"):
            expand_field(CronField.MINUTE, "1/5")

    def test_garbage(self):
        with pytest.raises(CronParseError, match="Invalid term"):
            expand_field(CronField.HOUR, "?")

    def test_empty_term(self):
        with pytest.raises(CronParseError, match="Empty term"):
            expand_field(CronField.HOUR, "1,,2")

    def test_empty_expression(self):
        with pytest.raises(CronParseError, match="Empty term"):
            expand_field(CronField.HOUR, "")

    def test_one_bad_term_fails_whole_field(self):
        with pytest.raises(CronParseError) as exc_info:
            expand_field(CronField.MINUTE, "0,15,99")
        assert exc_info.value.term == "99"


# =========================================================================
# Schedules
# =========================================================================


class TestParseCron:
    """Tests for whole-expression parsing into a CronSchedule."""

    def test_parse_all_stars(self):
        schedule = parse_cron("* * * * *")
        assert schedule.minutes == tuple(range(60))
        assert schedule.hours == tuple(range(24))
        assert schedule.days == tuple(range(1, 32))
        assert schedule.months == tuple(range(1, 13))
        assert schedule.weekdays == tuple(range(8))

    def test_parse_fields_matches_parse_cron(self):
        assert parse_fields(["0", "*/6", "1,15", "jan", "mon"]) == parse_cron("0 */6 1,15 jan mon")

    def test_invalid_field_count(self):
        with pytest.raises(CronParseError, match="5 fields"):
            parse_cron("* * *")

    def test_parse_fields_count(self):
        with pytest.raises(CronParseError, match="exactly 5"):
            parse_fields(["*"] * 6)

    def test_describe(self):
        schedule = parse_cron("*/15 0 1 jan mon-fri")
        assert schedule.describe() == [
            "minute: 0 15 30 45",
            "hour: 0",
            "day-of-month: 1",
            "month: 1",
            "day-of-week: 1 2 3 4 5",
        ]


class TestMatchesDay:
    """Day-of-month and day-of-week combination."""

    def test_weekday_star_defers_to_day_of_month(self):
        schedule = parse_cron("0 0 1 * *")
        assert schedule.every_day_of_week
        assert schedule.matches_day(1, 3)
        assert not schedule.matches_day(2, 4)

    def test_day_star_defers_to_weekday(self):
        schedule = parse_cron("0 0 * * mon")
        assert schedule.every_day_of_month
        assert schedule.matches_day(18, 1)
        assert not schedule.matches_day(19, 2)

    def test_both_restricted_is_or(self):
        schedule = parse_cron("0 0 1 * mon")
        assert schedule.matches_day(1, 5)
        assert schedule.matches_day(18, 1)
        assert not schedule.matches_day(19, 2)

    def test_both_star_matches_everything(self):
        schedule = parse_cron("* * * * *")
        assert all(schedule.matches_day(d, d % 7) for d in range(1, 32))

    def test_seven_matches_sunday(self):
        schedule = parse_cron("0 0 * * 7")
        assert schedule.matches_day(17, 0)
        assert not schedule.matches_day(18, 1)

    def test_zero_to_six_is_every_weekday(self):
        assert parse_cron("0 0 1 * 0-6").every_day_of_week
