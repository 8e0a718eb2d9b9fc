"""
Holiday computation engine.
"""

from feiertage.engine.buss_bettag import compute_buss_und_bettag
from feiertage.engine.easter import compute_easter
from feiertage.engine.year_builder import HOLIDAY_RULES, HolidayRule, HolidayYear, build_year

__all__ = [
    "compute_easter",
    "compute_buss_und_bettag",
    "build_year",
    "HolidayYear",
    "HolidayRule",
    "HOLIDAY_RULES",
]
