"""
German regions (federal states) known to the holiday engine.
"""

import logging
from enum import Enum
from typing import Tuple, Union

from feiertage.exceptions import InvalidRegionError

logger = logging.getLogger(__name__)


class Region(str, Enum):
    """
    Two-letter codes of the 16 German federal states plus ``ALL``.

    ``ALL`` is a selector of its own: it includes every holiday that is
    observed in at least one state.
    """

    BW = "BW"  # Baden-Württemberg
    BY = "BY"  # Bayern
    BE = "BE"  # Berlin
    BB = "BB"  # Brandenburg
    HB = "HB"  # Bremen
    HH = "HH"  # Hamburg
    HE = "HE"  # Hessen
    MV = "MV"  # Mecklenburg-Vorpommern
    NI = "NI"  # Niedersachsen
    NW = "NW"  # Nordrhein-Westfalen
    RP = "RP"  # Rheinland-Pfalz
    SL = "SL"  # Saarland
    SN = "SN"  # Sachsen
    ST = "ST"  # Sachsen-Anhalt
    SH = "SH"  # Schleswig-Holstein
    TH = "TH"  # Thüringen
    ALL = "ALL"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["Region", str, None]) -> "Region":
        """
        Resolve a region from an enum member or its exact code.

        Args:
            value: Region member or code such as "BY"

        Returns:
            The matching Region

        Raises:
            InvalidRegionError: If value is not a known region code
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls._value2member_map_:
            return cls._value2member_map_[value]

        logger.debug(f"Rejected region {value!r}")
        raise InvalidRegionError(value, [region.value for region in cls])


ALL_REGIONS: Tuple[Region, ...] = tuple(Region)

# Federal states only, without the ALL selector
FEDERAL_STATES: Tuple[Region, ...] = tuple(r for r in Region if r is not Region.ALL)
