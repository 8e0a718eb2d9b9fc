"""
Public holiday queries.

Every function validates its region (and holiday type) before touching the
engine, so the engine only ever sees known values. Dates may be ``date`` or
``datetime`` values; only the calendar day they fall on matters.
"""

from typing import List, Mapping, Optional, Union

from feiertage.engine.year_builder import HolidayYear, build_year
from feiertage.models.holiday import Holiday
from feiertage.models.holiday_type import HolidayType
from feiertage.models.region import Region
from feiertage.translations import TranslationRegistry, default_registry
from feiertage.utils.date_utils import (
    DateLike,
    is_sunday,
    to_calendar_date,
    to_normalized_day_key,
)

RegionLike = Union[Region, str]
HolidayTypeLike = Union[HolidayType, str]


def _holidays_of(value: DateLike, region: Region) -> HolidayYear:
    return build_year(to_calendar_date(value).year, region)


# ============================================================================
# Holiday queries
# ============================================================================


def is_holiday(value: DateLike, region: RegionLike) -> bool:
    """
    Check if a date is a public holiday in a region.

    Args:
        value: Date or datetime; time of day is ignored
        region: Two-letter region code or ``ALL``

    Raises:
        InvalidRegionError: If region is unknown

    Examples:
        >>> from datetime import date
        >>> is_holiday(date(2020, 12, 25), "ALL")
        True
    """
    region = Region.parse(region)
    return _holidays_of(value, region).contains_day(to_normalized_day_key(value))


def is_sun_or_holiday(value: DateLike, region: RegionLike) -> bool:
    """
    Check if a date is a Sunday or a public holiday in a region.

    Raises:
        InvalidRegionError: If region is unknown
    """
    region = Region.parse(region)
    return is_sunday(value) or is_holiday(value, region)


def is_specific_holiday(
    value: DateLike,
    holiday_type: HolidayTypeLike,
    region: RegionLike = Region.ALL,
) -> bool:
    """
    Check if a given holiday falls on a date in a region.

    Raises:
        InvalidRegionError: If region is unknown
        InvalidHolidayTypeError: If holiday_type is unknown
    """
    region = Region.parse(region)
    holiday_type = HolidayType.parse(holiday_type)
    return any(
        holiday.type is holiday_type and holiday.equals(value)
        for holiday in _holidays_of(value, region).holidays
    )


def get_holiday_by_date(value: DateLike, region: RegionLike = Region.ALL) -> Optional[Holiday]:
    """
    Return the holiday falling on a date, or None.

    When two holidays share a day the one listed first is returned.

    Raises:
        InvalidRegionError: If region is unknown
    """
    region = Region.parse(region)
    return next(
        (holiday for holiday in _holidays_of(value, region).holidays if holiday.equals(value)),
        None,
    )


def get_holidays(year: int, region: RegionLike) -> List[Holiday]:
    """
    Return all holidays of a year in a region, sorted by date.

    Raises:
        InvalidRegionError: If region is unknown

    Examples:
        >>> len(get_holidays(2023, "ALL"))
        17
    """
    region = Region.parse(region)
    return list(build_year(year, region).holidays)


# ============================================================================
# Translations
# ============================================================================


def add_translation(
    iso_code: str,
    table: Mapping[HolidayTypeLike, str],
    registry: TranslationRegistry = default_registry,
) -> None:
    """Register a translation table, see :meth:`TranslationRegistry.add_translation`."""
    registry.add_translation(iso_code, table)


def set_language(iso_code: str, registry: TranslationRegistry = default_registry) -> None:
    """Change the current language; unknown codes are ignored with an error log."""
    registry.set_language(iso_code)


def get_language(registry: TranslationRegistry = default_registry) -> str:
    """Return the current language code."""
    return registry.get_language()


def translate(
    holiday: Union[Holiday, HolidayTypeLike],
    language: Optional[str] = None,
    registry: TranslationRegistry = default_registry,
) -> str:
    """Return the display name of a holiday in the given or current language."""
    return registry.translate(holiday, language)
