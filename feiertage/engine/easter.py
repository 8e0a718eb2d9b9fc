"""
Easter Sunday for a Gregorian calendar year.
"""

from datetime import date

from feiertage.utils.date_utils import make_date


def compute_easter(year: int) -> date:
    """
    Return the date of Easter Sunday in ``year``.

    Uses the Gaussian congruence for the Gregorian calendar (valid from
    1583 on):

    - C: century number
    - N: golden number minus one
    - K: correction for the solar/lunar century shift
    - I: days from March 21 to the paschal full moon
    - J: weekday of the paschal full moon

    Every movable feast is an offset from this date.

    Examples:
        >>> compute_easter(2023)
        datetime.date(2023, 4, 9)
        >>> compute_easter(2000)
        datetime.date(2000, 4, 23)
    """
    c = year // 100
    n = year - 19 * (year // 19)
    k = (c - 17) // 25

    i = c - c // 4 - (c - k) // 3 + 19 * n + 15
    i -= 30 * (i // 30)
    i -= (i // 28) * (1 - (i // 28) * (29 // (i + 1)) * ((21 - n) // 11))

    j = year + year // 4 + i + 2 - c + c // 4
    j -= 7 * (j // 7)

    l = i - j
    month = 3 + (l + 40) // 44
    day = l + 28 - 31 * (month // 4)

    return make_date(year, month, day)
