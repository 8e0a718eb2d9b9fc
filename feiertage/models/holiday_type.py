"""
Identifiers of the public holidays the engine knows about.

The identifiers are shared between the year builder and the translation
tables, so every table is keyed by these members.
"""

import logging
from enum import Enum
from typing import Tuple, Union

from feiertage.exceptions import InvalidHolidayTypeError

logger = logging.getLogger(__name__)


class HolidayType(str, Enum):
    """Closed set of holiday identifiers."""

    NEUJAHRSTAG = "NEUJAHRSTAG"
    HEILIGEDREIKOENIGE = "HEILIGEDREIKOENIGE"
    KARFREITAG = "KARFREITAG"
    OSTERSONNTAG = "OSTERSONNTAG"
    OSTERMONTAG = "OSTERMONTAG"
    TAG_DER_ARBEIT = "TAG_DER_ARBEIT"
    CHRISTIHIMMELFAHRT = "CHRISTIHIMMELFAHRT"
    PFINGSTSONNTAG = "PFINGSTSONNTAG"
    PFINGSTMONTAG = "PFINGSTMONTAG"
    FRONLEICHNAM = "FRONLEICHNAM"
    MARIAHIMMELFAHRT = "MARIAHIMMELFAHRT"
    DEUTSCHEEINHEIT = "DEUTSCHEEINHEIT"
    REFORMATIONSTAG = "REFORMATIONSTAG"
    ALLERHEILIGEN = "ALLERHEILIGEN"
    BUBETAG = "BUBETAG"
    ERSTERWEIHNACHTSFEIERTAG = "ERSTERWEIHNACHTSFEIERTAG"
    ZWEITERWEIHNACHTSFEIERTAG = "ZWEITERWEIHNACHTSFEIERTAG"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["HolidayType", str, None]) -> "HolidayType":
        """
        Resolve a holiday type from an enum member or its exact identifier.

        Raises:
            InvalidHolidayTypeError: If value is not a known identifier
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls._value2member_map_:
            return cls._value2member_map_[value]

        logger.debug(f"Rejected holiday type {value!r}")
        raise InvalidHolidayTypeError(value, [holiday_type.value for holiday_type in cls])


ALL_HOLIDAY_TYPES: Tuple[HolidayType, ...] = tuple(HolidayType)
