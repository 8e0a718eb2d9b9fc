"""
Unit tests for date_utils module.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from feiertage.utils.date_utils import (
    add_days,
    get_weekday_name,
    is_sunday,
    make_date,
    parse_date,
    to_calendar_date,
    to_canonical_date_token,
    to_normalized_day_key,
)

CET = timezone(timedelta(hours=1))
NEW_YORK_WINTER = timezone(timedelta(hours=-5))


class TestAddDays:
    """Tests for add_days function."""

    def test_add_days_forward(self):
        """Test adding days within a month."""
        assert add_days(date(2025, 4, 20), 1) == date(2025, 4, 21)

    def test_add_days_backward(self):
        """Test negative offsets."""
        assert add_days(date(2025, 4, 20), -2) == date(2025, 4, 18)

    def test_month_and_year_rollover(self):
        """Test rollover at month and year boundaries."""
        assert add_days(date(2024, 3, 31), 39) == date(2024, 5, 9)
        assert add_days(date(2024, 12, 31), 1) == date(2025, 1, 1)
        assert add_days(date(2025, 1, 1), -1) == date(2024, 12, 31)

    def test_leap_day(self):
        """Test February in leap and common years."""
        assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
        assert add_days(date(2023, 2, 28), 1) == date(2023, 3, 1)

    def test_across_dst_change(self):
        """Test DST transitions do not shift calendar days."""
        # Europe switched to summer time on 2025-03-30
        assert add_days(date(2025, 3, 29), 2) == date(2025, 3, 31)

    def test_does_not_mutate_input(self):
        """Test the original date is unchanged."""
        original = date(2025, 4, 20)
        add_days(original, 10)
        assert original == date(2025, 4, 20)

    def test_datetime_input_returns_date(self):
        """Test datetimes are reduced to their calendar day first."""
        assert add_days(datetime(2025, 4, 20, 23, 30), 1) == date(2025, 4, 21)


class TestCanonicalDateToken:
    """Tests for to_canonical_date_token function."""

    def test_date(self):
        """Test plain dates format as ISO."""
        assert to_canonical_date_token(date(2020, 12, 25)) == "2020-12-25"

    def test_naive_datetime_ignores_time(self):
        """Test time of day does not matter for naive datetimes."""
        assert to_canonical_date_token(datetime(2020, 12, 25, 0, 0)) == "2020-12-25"
        assert to_canonical_date_token(datetime(2020, 12, 25, 23, 59, 59)) == "2020-12-25"

    def test_aware_datetime_uses_wall_clock_day(self):
        """Test aware datetimes resolve to their local calendar day."""
        # 00:30 in Berlin is still the previous day in UTC
        assert to_canonical_date_token(datetime(2020, 12, 25, 0, 30, tzinfo=CET)) == "2020-12-25"

    def test_negative_offset_at_local_midnight(self):
        """Test midnight in a negative-offset zone keeps its local day."""
        value = datetime(2020, 12, 25, 0, 0, tzinfo=NEW_YORK_WINTER)
        assert to_canonical_date_token(value) == "2020-12-25"

    def test_late_evening_negative_offset(self):
        """Test late evening west of UTC is not pushed to the next day."""
        value = datetime(2020, 12, 24, 23, 0, tzinfo=NEW_YORK_WINTER)
        assert to_canonical_date_token(value) == "2020-12-24"

    def test_invalid_type(self):
        """Test non-date values are rejected."""
        with pytest.raises(TypeError):
            to_canonical_date_token("2020-12-25")


class TestNormalizedDayKey:
    """Tests for to_normalized_day_key function."""

    def test_same_day_same_key(self):
        """Test values on the same day share a key."""
        key = to_normalized_day_key(date(2020, 12, 25))
        assert to_normalized_day_key(datetime(2020, 12, 25, 8, 15)) == key
        assert to_normalized_day_key(datetime(2020, 12, 25, 23, 0, tzinfo=CET)) == key

    def test_different_days_different_keys(self):
        """Test neighbouring days have different, ordered keys."""
        assert to_normalized_day_key(date(2020, 12, 24)) < to_normalized_day_key(date(2020, 12, 25))

    def test_key_is_hashable_int(self):
        """Test keys are plain integers."""
        assert isinstance(to_normalized_day_key(date(2020, 1, 1)), int)


class TestCalendarHelpers:
    """Tests for small calendar helpers."""

    def test_make_date_natural_month(self):
        """Test months are 1-based."""
        assert make_date(2025, 1, 6) == date(2025, 1, 6)

    def test_to_calendar_date(self):
        """Test datetimes are reduced to dates."""
        assert to_calendar_date(datetime(2020, 12, 25, 18)) == date(2020, 12, 25)
        assert to_calendar_date(date(2020, 12, 25)) == date(2020, 12, 25)

    def test_is_sunday(self):
        """Test Sunday detection."""
        assert is_sunday(date(2025, 1, 5))
        assert is_sunday(datetime(2025, 1, 5, 22, 0))
        assert not is_sunday(date(2025, 1, 6))

    def test_get_weekday_name(self):
        """Test weekday names."""
        assert get_weekday_name(date(2025, 1, 6)) == "Monday"
        assert get_weekday_name(date(2025, 1, 11)) == "Saturday"


class TestParseDate:
    """Tests for parse_date function."""

    def test_iso_format(self):
        """Test parsing YYYY-MM-DD format."""
        assert parse_date("2025-08-15") == date(2025, 8, 15)

    def test_german_format(self):
        """Test parsing DD.MM.YYYY format."""
        assert parse_date("15.08.2025") == date(2025, 8, 15)

    def test_slash_format(self):
        """Test parsing DD/MM/YYYY format."""
        assert parse_date("15/08/2025") == date(2025, 8, 15)

    def test_whitespace(self):
        """Test surrounding whitespace is ignored."""
        assert parse_date("  2025-08-15  ") == date(2025, 8, 15)

    def test_invalid(self):
        """Test invalid strings return None."""
        assert parse_date("invalid") is None
        assert parse_date("2025-13-01") is None
        assert parse_date("") is None
        assert parse_date(None) is None
