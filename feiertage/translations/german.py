"""German holiday names. Default table, covers every holiday type."""

from typing import Dict

from feiertage.models.holiday_type import HolidayType

GERMAN_TRANSLATIONS: Dict[HolidayType, str] = {
    HolidayType.NEUJAHRSTAG: "Neujahrstag",
    HolidayType.HEILIGEDREIKOENIGE: "Heilige Drei Könige",
    HolidayType.KARFREITAG: "Karfreitag",
    HolidayType.OSTERSONNTAG: "Ostersonntag",
    HolidayType.OSTERMONTAG: "Ostermontag",
    HolidayType.TAG_DER_ARBEIT: "Tag der Arbeit",
    HolidayType.CHRISTIHIMMELFAHRT: "Christi Himmelfahrt",
    HolidayType.PFINGSTSONNTAG: "Pfingstsonntag",
    HolidayType.PFINGSTMONTAG: "Pfingstmontag",
    HolidayType.FRONLEICHNAM: "Fronleichnam",
    HolidayType.MARIAHIMMELFAHRT: "Mariä Himmelfahrt",
    HolidayType.DEUTSCHEEINHEIT: "Tag der Deutschen Einheit",
    HolidayType.REFORMATIONSTAG: "Reformationstag",
    HolidayType.ALLERHEILIGEN: "Allerheiligen",
    HolidayType.BUBETAG: "Buß- und Bettag",
    HolidayType.ERSTERWEIHNACHTSFEIERTAG: "1. Weihnachtsfeiertag",
    HolidayType.ZWEITERWEIHNACHTSFEIERTAG: "2. Weihnachtsfeiertag",
}
