"""
Buß- und Bettag (Day of Prayer and Repentance).
"""

from datetime import date

from feiertage.utils.date_utils import add_days, make_date

# Days from the Wednesday before the first Advent to Christmas,
# not counting Christmas' own weekday offset.
FIRST_ADVENT_OFFSET = 32


def compute_buss_und_bettag(year: int) -> date:
    """
    Return the date of Buß- und Bettag in ``year``.

    It is the Wednesday 11 days before the first Advent Sunday (32 days
    before the fourth Advent, which is the last Sunday before Christmas). With
    Christmas' ISO weekday W (Monday=1 .. Sunday=7) it lies ``32 + W``
    days before December 25.

    Examples:
        >>> compute_buss_und_bettag(2020)
        datetime.date(2020, 11, 18)
    """
    christmas = make_date(year, 12, 25)
    days_before_christmas = FIRST_ADVENT_OFFSET + christmas.isoweekday()
    return add_days(christmas, -days_before_christmas)
