"""
feiertage - German public holidays by year and federal state.

Computes the holidays of a year for a German region, answers whether a
date is a holiday and renders holiday names in a configurable language.
"""

from feiertage.api import (
    add_translation,
    get_holiday_by_date,
    get_holidays,
    get_language,
    is_holiday,
    is_specific_holiday,
    is_sun_or_holiday,
    set_language,
    translate,
)
from feiertage.exceptions import (
    FeiertageException,
    InvalidHolidayTypeError,
    InvalidRegionError,
)
from feiertage.models import (
    ALL_HOLIDAY_TYPES,
    ALL_REGIONS,
    Holiday,
    HolidayType,
    Region,
)

__version__ = "1.0.0"
__app_name__ = "feiertage"

__all__ = [
    "add_translation",
    "get_holiday_by_date",
    "get_holidays",
    "get_language",
    "is_holiday",
    "is_specific_holiday",
    "is_sun_or_holiday",
    "set_language",
    "translate",
    "FeiertageException",
    "InvalidHolidayTypeError",
    "InvalidRegionError",
    "ALL_HOLIDAY_TYPES",
    "ALL_REGIONS",
    "Holiday",
    "HolidayType",
    "Region",
]
