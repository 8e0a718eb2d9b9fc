"""
Value types shared by the holiday engine, the translations and the API.
"""

from feiertage.models.holiday import Holiday
from feiertage.models.holiday_type import ALL_HOLIDAY_TYPES, HolidayType
from feiertage.models.region import ALL_REGIONS, FEDERAL_STATES, Region

__all__ = [
    "Holiday",
    "HolidayType",
    "Region",
    "ALL_HOLIDAY_TYPES",
    "ALL_REGIONS",
    "FEDERAL_STATES",
]
