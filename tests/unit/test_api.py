"""
Unit tests for the public holiday API.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

import feiertage
from feiertage import (
    Holiday,
    HolidayType,
    InvalidHolidayTypeError,
    InvalidRegionError,
    Region,
    get_holiday_by_date,
    get_holidays,
    is_holiday,
    is_specific_holiday,
    is_sun_or_holiday,
)
from feiertage.exceptions import FeiertageException


class TestIsHoliday:
    """Tests for is_holiday."""

    def test_christmas_all(self):
        """Test Christmas Day 2020 is a holiday."""
        assert is_holiday(date(2020, 12, 25), "ALL")

    @pytest.mark.parametrize("hour,minute", [(0, 0), (0, 1), (12, 0), (23, 59)])
    def test_time_of_day_ignored(self, hour, minute):
        """Test the time component does not change the result."""
        assert is_holiday(datetime(2020, 12, 25, hour, minute), "ALL")
        assert not is_holiday(datetime(2020, 12, 24, hour, minute), "ALL")

    def test_aware_datetime(self):
        """Test aware datetimes use their own calendar day."""
        late_evening = datetime(2020, 12, 25, 23, 30, tzinfo=timezone(timedelta(hours=-8)))
        assert is_holiday(late_evening, "ALL")

    def test_regular_day(self):
        """Test a regular working day."""
        assert not is_holiday(date(2020, 12, 23), "ALL")

    def test_regional_holiday(self):
        """Test regional holidays depend on the region."""
        assert is_holiday(date(2025, 1, 6), "BY")
        assert not is_holiday(date(2025, 1, 6), "BE")

    def test_region_enum_accepted(self):
        """Test Region members are accepted."""
        assert is_holiday(date(2025, 10, 31), Region.SN)

    @pytest.mark.parametrize("region", ["XX", "by", "", None, 42])
    def test_invalid_region(self, region):
        """Test unknown regions are rejected."""
        with pytest.raises(InvalidRegionError):
            is_holiday(date(2020, 12, 25), region)

    def test_invalid_region_message(self):
        """Test the error lists the accepted codes."""
        with pytest.raises(InvalidRegionError, match="Must be one of BW, BY"):
            is_holiday(date(2020, 12, 25), "XX")

    def test_invalid_region_is_value_error(self):
        """Test validation errors are ValueErrors and library exceptions."""
        with pytest.raises(ValueError):
            is_holiday(date(2020, 12, 25), "XX")
        with pytest.raises(FeiertageException):
            is_holiday(date(2020, 12, 25), "XX")


class TestIsSunOrHoliday:
    """Tests for is_sun_or_holiday."""

    def test_every_sunday_of_2025(self):
        """Test every Sunday counts regardless of holidays."""
        day = date(2025, 1, 5)
        while day.year == 2025:
            assert is_sun_or_holiday(day, "BE"), day
            day += timedelta(days=7)

    def test_every_holiday(self):
        """Test every holiday counts."""
        for holiday in get_holidays(2025, "ALL"):
            assert is_sun_or_holiday(holiday.date, "ALL")

    def test_regular_weekday(self):
        """Test a normal Wednesday is neither."""
        assert not is_sun_or_holiday(date(2025, 3, 12), "ALL")

    def test_saturday_is_not(self):
        """Test Saturdays are not treated as holidays."""
        assert not is_sun_or_holiday(date(2025, 3, 15), "ALL")

    def test_invalid_region(self):
        """Test region is validated even on a Sunday."""
        with pytest.raises(InvalidRegionError):
            is_sun_or_holiday(date(2025, 1, 5), "XX")


class TestIsSpecificHoliday:
    """Tests for is_specific_holiday."""

    def test_matching_type(self):
        """Test the holiday on that date matches."""
        assert is_specific_holiday(date(2020, 12, 25), HolidayType.ERSTERWEIHNACHTSFEIERTAG)
        assert is_specific_holiday(date(2020, 12, 25), "ERSTERWEIHNACHTSFEIERTAG", "BE")

    def test_other_type_on_holiday(self):
        """Test a different holiday on that date does not match."""
        assert not is_specific_holiday(date(2020, 12, 25), HolidayType.NEUJAHRSTAG)

    def test_region_without_holiday(self):
        """Test regional holidays respect the region."""
        assert is_specific_holiday(date(2020, 11, 18), HolidayType.BUBETAG, "SN")
        assert not is_specific_holiday(date(2020, 11, 18), HolidayType.BUBETAG, "BY")

    def test_coinciding_holidays(self):
        """Test both holidays on 2008-05-01 match."""
        assert is_specific_holiday(date(2008, 5, 1), HolidayType.TAG_DER_ARBEIT)
        assert is_specific_holiday(date(2008, 5, 1), HolidayType.CHRISTIHIMMELFAHRT)

    def test_invalid_holiday_type(self):
        """Test unknown holiday identifiers are rejected."""
        with pytest.raises(InvalidHolidayTypeError, match="NEUJAHRSTAG"):
            is_specific_holiday(date(2020, 12, 25), "CHRISTMAS")
        with pytest.raises(InvalidHolidayTypeError):
            is_specific_holiday(date(2020, 12, 25), None)

    def test_invalid_region_checked_first(self):
        """Test region is validated before the holiday type."""
        with pytest.raises(InvalidRegionError):
            is_specific_holiday(date(2020, 12, 25), "CHRISTMAS", "XX")


class TestGetHolidayByDate:
    """Tests for get_holiday_by_date."""

    def test_found(self):
        """Test the holiday on a date is returned."""
        holiday = get_holiday_by_date(datetime(2023, 4, 7, 15, 30))
        assert holiday == Holiday(HolidayType.KARFREITAG, date(2023, 4, 7))

    def test_not_found(self):
        """Test None is returned on regular days."""
        assert get_holiday_by_date(date(2023, 4, 12)) is None

    def test_region_default_all(self):
        """Test the default region is ALL."""
        assert get_holiday_by_date(date(2023, 8, 15)).type is HolidayType.MARIAHIMMELFAHRT
        assert get_holiday_by_date(date(2023, 8, 15), "BY") is None

    def test_coinciding_returns_first(self):
        """Test the first listed holiday wins when two share a day."""
        assert get_holiday_by_date(date(2008, 5, 1)).type is HolidayType.TAG_DER_ARBEIT

    def test_invalid_region(self):
        """Test unknown regions are rejected."""
        with pytest.raises(InvalidRegionError):
            get_holiday_by_date(date(2023, 4, 7), "XX")


class TestGetHolidays:
    """Tests for get_holidays."""

    def test_returns_sorted_list(self):
        """Test a sorted list of Holiday values."""
        holidays = get_holidays(2025, "BY")
        assert isinstance(holidays, list)
        assert [h.date for h in holidays] == sorted(h.date for h in holidays)
        assert holidays[0] == Holiday(HolidayType.NEUJAHRSTAG, date(2025, 1, 1))

    def test_list_is_a_copy(self):
        """Test callers cannot change cached results."""
        holidays = get_holidays(2025, "BY")
        holidays.clear()
        assert len(get_holidays(2025, "BY")) == 12

    def test_reformation_2017(self):
        """Test 2017 includes Reformation Day everywhere."""
        assert date(2017, 10, 31) in [h.date for h in get_holidays(2017, "BW")]
        assert date(2016, 10, 31) not in [h.date for h in get_holidays(2016, "BW")]

    def test_invalid_region(self):
        """Test unknown regions are rejected."""
        with pytest.raises(InvalidRegionError):
            get_holidays(2025, "Bavaria")


class TestPackageExports:
    """Tests for the package namespace."""

    def test_closed_sets(self):
        """Test exported region and holiday type sets."""
        assert len(feiertage.ALL_REGIONS) == 17
        assert Region.ALL in feiertage.ALL_REGIONS
        assert len(feiertage.ALL_HOLIDAY_TYPES) == 17
