"""English holiday names."""

from typing import Dict

from feiertage.models.holiday_type import HolidayType

ENGLISH_TRANSLATIONS: Dict[HolidayType, str] = {
    HolidayType.NEUJAHRSTAG: "New Year's Day",
    HolidayType.HEILIGEDREIKOENIGE: "Epiphany",
    HolidayType.KARFREITAG: "Good Friday",
    HolidayType.OSTERSONNTAG: "Easter Sunday",
    HolidayType.OSTERMONTAG: "Easter Monday",
    HolidayType.TAG_DER_ARBEIT: "Labour Day",
    HolidayType.CHRISTIHIMMELFAHRT: "Ascension Day",
    HolidayType.PFINGSTSONNTAG: "Whit Sunday",
    HolidayType.PFINGSTMONTAG: "Whit Monday",
    HolidayType.FRONLEICHNAM: "Corpus Christi",
    HolidayType.MARIAHIMMELFAHRT: "Assumption Day",
    HolidayType.DEUTSCHEEINHEIT: "German Unity Day",
    HolidayType.REFORMATIONSTAG: "Reformation Day",
    HolidayType.ALLERHEILIGEN: "All Saints' Day",
    HolidayType.BUBETAG: "Day of Prayer and Repentance",
    HolidayType.ERSTERWEIHNACHTSFEIERTAG: "Christmas Day",
    HolidayType.ZWEITERWEIHNACHTSFEIERTAG: "Boxing Day",
}
