"""
Holiday value object produced by the year builder.
"""

from dataclasses import dataclass
from datetime import date

from feiertage.models.holiday_type import HolidayType
from feiertage.utils.date_utils import (
    DateLike,
    to_canonical_date_token,
    to_normalized_day_key,
)


@dataclass(frozen=True)
class Holiday:
    """One concrete occurrence of a public holiday."""

    type: HolidayType
    date: date

    @property
    def date_string(self) -> str:
        """Canonical ``YYYY-MM-DD`` token of the holiday's day."""
        return to_canonical_date_token(self.date)

    @property
    def normalized_day(self) -> int:
        """Integer day key, see :func:`to_normalized_day_key`."""
        return to_normalized_day_key(self.date)

    def equals(self, other: DateLike) -> bool:
        """
        Check if ``other`` falls on the same calendar day as this holiday.

        Time of day and timezone offset of ``other`` are ignored.
        """
        return self.date_string == to_canonical_date_token(other)
