"""
Translation registry for holiday display names.

The registry owns the language tables and the current language. German is
the default language and its table covers every holiday type; other tables
may be partial and are back-filled from German when they are registered.

All state changes go through the registry's methods and are guarded by a
lock, so a registry can be shared between threads.
"""

import logging
import threading
from typing import Dict, Mapping, Optional, Union

from feiertage.exceptions import TranslationException
from feiertage.models.holiday import Holiday
from feiertage.models.holiday_type import ALL_HOLIDAY_TYPES, HolidayType
from feiertage.translations.english import ENGLISH_TRANSLATIONS
from feiertage.translations.german import GERMAN_TRANSLATIONS

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "de"

TranslationTable = Dict[HolidayType, str]


def _bundled_tables() -> Dict[str, TranslationTable]:
    return {
        DEFAULT_LANGUAGE: dict(GERMAN_TRANSLATIONS),
        "en": dict(ENGLISH_TRANSLATIONS),
    }


class TranslationRegistry:
    """
    Language-keyed holiday name tables with a current language.

    Examples:
        >>> registry = TranslationRegistry()
        >>> registry.translate(HolidayType.NEUJAHRSTAG)
        'Neujahrstag'
        >>> registry.set_language("en")
        >>> registry.translate(HolidayType.NEUJAHRSTAG)
        "New Year's Day"
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        """
        Initialize the registry with the bundled tables.

        Args:
            language: Initial current language. Falls back to the default
                language if no table is registered for it.
        """
        self._lock = threading.RLock()
        self._tables: Dict[str, TranslationTable] = _bundled_tables()
        self._language = DEFAULT_LANGUAGE
        if language.lower() != DEFAULT_LANGUAGE:
            self.set_language(language)

    @property
    def default_language(self) -> str:
        return DEFAULT_LANGUAGE

    def languages(self) -> list[str]:
        """Registered language codes, sorted."""
        with self._lock:
            return sorted(self._tables)

    def has_language(self, iso_code: str) -> bool:
        with self._lock:
            return iso_code.lower() in self._tables

    def add_translation(self, iso_code: str, table: Mapping[Union[HolidayType, str], str]) -> None:
        """
        Register or replace the table for a language.

        Entries missing from ``table`` (or empty) are filled from the default
        language and a warning is logged. The caller's mapping is not
        modified.

        Args:
            iso_code: Language code, case-insensitive (e.g. "en")
            table: Mapping of holiday type (member or identifier) to name

        Raises:
            InvalidHolidayTypeError: If the table has an unknown key
        """
        iso_code = iso_code.lower()
        translation: TranslationTable = {
            HolidayType.parse(key): name for key, name in table.items()
        }

        with self._lock:
            default_table = self._tables[DEFAULT_LANGUAGE]
            missing = [
                holiday_type for holiday_type in ALL_HOLIDAY_TYPES
                if not translation.get(holiday_type)
            ]
            for holiday_type in missing:
                translation[holiday_type] = default_table[holiday_type]

            if missing:
                logger.warning(
                    f"add_translation: translation '{iso_code}' is missing "
                    f"{len(missing)} holidays ({', '.join(missing)}), "
                    f"took '{DEFAULT_LANGUAGE}' as fallback"
                )

            self._tables[iso_code] = translation

        logger.debug(f"Registered translation '{iso_code}'")

    def set_language(self, iso_code: str) -> None:
        """
        Make ``iso_code`` the current language.

        Unknown codes are ignored with an error log; the current language
        stays unchanged.
        """
        iso_code = iso_code.lower()
        with self._lock:
            if iso_code not in self._tables:
                logger.error(
                    f"Tried to set language to '{iso_code}' but the translation is missing. "
                    f"Use add_translation('{iso_code}', table) first"
                )
                return
            self._language = iso_code

    def get_language(self) -> str:
        with self._lock:
            return self._language

    def translate(
        self,
        holiday: Union[Holiday, HolidayType, str],
        language: Optional[str] = None,
    ) -> str:
        """
        Return the display name of a holiday.

        Args:
            holiday: Holiday, holiday type or identifier
            language: Language code; the current language when omitted

        Raises:
            InvalidHolidayTypeError: If an identifier is unknown
            TranslationException: If ``language`` has no registered table
        """
        holiday_type = holiday.type if isinstance(holiday, Holiday) else HolidayType.parse(holiday)
        with self._lock:
            iso_code = (language or self._language).lower()
            if iso_code not in self._tables:
                raise TranslationException(f"No translation registered for language '{iso_code}'")
            return self._tables[iso_code][holiday_type]

    def reset(self, language: str = DEFAULT_LANGUAGE) -> None:
        """Restore the bundled tables and the given current language."""
        with self._lock:
            self._tables = _bundled_tables()
            self._language = DEFAULT_LANGUAGE
            if language.lower() != DEFAULT_LANGUAGE:
                self.set_language(language)
