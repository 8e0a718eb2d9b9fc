"""
Assembly of a year's public holidays for a region.

Each holiday is described by a rule: how its date is derived (a fixed day,
an offset from Easter Sunday, or a dedicated computation) and which
regions observe it. Region gates are plain predicates over
``(year, region)`` so they can be tested on their own.

The engine trusts its inputs; regions are validated by the public API
before they reach this module.
"""

import logging
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Callable, FrozenSet, List, Tuple

from feiertage.config import settings
from feiertage.engine.buss_bettag import compute_buss_und_bettag
from feiertage.engine.easter import compute_easter
from feiertage.models.holiday import Holiday
from feiertage.models.holiday_type import HolidayType
from feiertage.models.region import Region
from feiertage.utils.date_utils import add_days, make_date

logger = logging.getLogger(__name__)

# Reformation Day was a nationwide holiday for the 500th anniversary
REFORMATION_JUBILEE_YEAR = 2017

EPIPHANY_REGIONS: FrozenSet[Region] = frozenset({Region.BW, Region.BY, Region.ST, Region.ALL})
EASTER_SUNDAY_REGIONS: FrozenSet[Region] = frozenset({Region.BB, Region.ALL})
CORPUS_CHRISTI_REGIONS: FrozenSet[Region] = frozenset(
    {Region.BW, Region.BY, Region.HE, Region.NW, Region.RP, Region.SL, Region.ALL}
)
ASSUMPTION_REGIONS: FrozenSet[Region] = frozenset({Region.SL, Region.ALL})
REFORMATION_REGIONS: FrozenSet[Region] = frozenset(
    {Region.BB, Region.MV, Region.SN, Region.ST, Region.TH, Region.ALL}
)
ALL_SAINTS_REGIONS: FrozenSet[Region] = frozenset(
    {Region.BW, Region.BY, Region.NW, Region.RP, Region.SL, Region.ALL}
)
BUSS_UND_BETTAG_REGIONS: FrozenSet[Region] = frozenset({Region.SN, Region.ALL})


# ============================================================================
# Region gates
# ============================================================================


def nationwide(year: int, region: Region) -> bool:
    """Holidays observed in every region."""
    return True


def observes_epiphany(year: int, region: Region) -> bool:
    return region in EPIPHANY_REGIONS


def observes_easter_and_whit_sunday(year: int, region: Region) -> bool:
    return region in EASTER_SUNDAY_REGIONS


def observes_corpus_christi(year: int, region: Region) -> bool:
    return region in CORPUS_CHRISTI_REGIONS


def observes_assumption_day(year: int, region: Region) -> bool:
    return region in ASSUMPTION_REGIONS


def observes_reformation_day(year: int, region: Region) -> bool:
    """Regional holiday, but observed everywhere in the jubilee year 2017."""
    return year == REFORMATION_JUBILEE_YEAR or region in REFORMATION_REGIONS


def observes_all_saints_day(year: int, region: Region) -> bool:
    return region in ALL_SAINTS_REGIONS


def observes_buss_und_bettag(year: int, region: Region) -> bool:
    return region in BUSS_UND_BETTAG_REGIONS


# ============================================================================
# Rules
# ============================================================================


@dataclass(frozen=True)
class HolidayRule:
    """
    How one holiday is dated and where it applies.

    Attributes:
        type: Holiday identifier
        resolve: Maps ``(year, easter_sunday)`` to the holiday's date
        applies: Region gate over ``(year, region)``
    """

    type: HolidayType
    resolve: Callable[[int, date], date]
    applies: Callable[[int, Region], bool] = nationwide


def fixed(month: int, day: int) -> Callable[[int, date], date]:
    """Date resolver for a holiday on the same calendar day every year."""
    return lambda year, easter: make_date(year, month, day)


def easter_offset(days: int) -> Callable[[int, date], date]:
    """Date resolver for a movable feast ``days`` after Easter Sunday."""
    return lambda year, easter: add_days(easter, days)


# Declaration order is the tie-break order when two holidays share a day
HOLIDAY_RULES: Tuple[HolidayRule, ...] = (
    HolidayRule(HolidayType.NEUJAHRSTAG, fixed(1, 1)),
    HolidayRule(HolidayType.TAG_DER_ARBEIT, fixed(5, 1)),
    HolidayRule(HolidayType.DEUTSCHEEINHEIT, fixed(10, 3)),
    HolidayRule(HolidayType.ERSTERWEIHNACHTSFEIERTAG, fixed(12, 25)),
    HolidayRule(HolidayType.ZWEITERWEIHNACHTSFEIERTAG, fixed(12, 26)),
    HolidayRule(HolidayType.KARFREITAG, easter_offset(-2)),
    HolidayRule(HolidayType.OSTERMONTAG, easter_offset(1)),
    HolidayRule(HolidayType.CHRISTIHIMMELFAHRT, easter_offset(39)),
    HolidayRule(HolidayType.PFINGSTMONTAG, easter_offset(50)),
    HolidayRule(HolidayType.HEILIGEDREIKOENIGE, fixed(1, 6), observes_epiphany),
    HolidayRule(HolidayType.OSTERSONNTAG, easter_offset(0), observes_easter_and_whit_sunday),
    HolidayRule(HolidayType.PFINGSTSONNTAG, easter_offset(49), observes_easter_and_whit_sunday),
    HolidayRule(HolidayType.FRONLEICHNAM, easter_offset(60), observes_corpus_christi),
    HolidayRule(HolidayType.MARIAHIMMELFAHRT, fixed(8, 15), observes_assumption_day),
    HolidayRule(HolidayType.REFORMATIONSTAG, fixed(10, 31), observes_reformation_day),
    HolidayRule(HolidayType.ALLERHEILIGEN, fixed(11, 1), observes_all_saints_day),
    HolidayRule(
        HolidayType.BUBETAG,
        lambda year, easter: compute_buss_und_bettag(year),
        observes_buss_und_bettag,
    ),
)


# ============================================================================
# Year builder
# ============================================================================


@dataclass(frozen=True)
class HolidayYear:
    """
    Holidays of one (year, region), sorted by date.

    ``day_keys`` runs parallel to ``holidays`` and holds each holiday's
    normalized day key; ``day_key_set`` is the same keys for O(1) lookups.
    """

    year: int
    region: Region
    holidays: Tuple[Holiday, ...]
    day_keys: Tuple[int, ...]
    day_key_set: FrozenSet[int]

    def contains_day(self, day_key: int) -> bool:
        """Check if any holiday falls on the day with this key."""
        return day_key in self.day_key_set


def _build_year(year: int, region: Region) -> HolidayYear:
    easter = compute_easter(year)

    holidays: List[Holiday] = [
        Holiday(rule.type, rule.resolve(year, easter))
        for rule in HOLIDAY_RULES
        if rule.applies(year, region)
    ]
    # sorted() is stable, so same-day holidays keep rule order
    holidays = sorted(holidays, key=lambda holiday: holiday.date)
    day_keys = tuple(holiday.normalized_day for holiday in holidays)

    logger.debug(f"Built {len(holidays)} holidays for {year}/{region}")

    return HolidayYear(
        year=year,
        region=region,
        holidays=tuple(holidays),
        day_keys=day_keys,
        day_key_set=frozenset(day_keys),
    )


_build_year_cached = lru_cache(maxsize=settings.year_cache_size)(_build_year)


def build_year(year: int, region: Region) -> HolidayYear:
    """
    Build the ordered holidays of ``year`` for ``region``.

    The result is a pure function of its arguments and is memoized; it is
    immutable, so cached values can be shared between callers.

    Args:
        year: Gregorian calendar year (1583 or later)
        region: Validated region

    Returns:
        HolidayYear with holidays sorted ascending by date
    """
    return _build_year_cached(year, region)


def clear_cache() -> None:
    """Drop memoized year results."""
    _build_year_cached.cache_clear()
