"""
Input validators for CLI commands.
Turns raw command line strings into checked values with helpful messages.
"""

from datetime import date
from typing import Optional

import typer

from feiertage.models.region import Region
from feiertage.translations import default_registry
from feiertage.utils.date_utils import parse_date

# Gregorian Easter computation is defined from 1583 on
MIN_YEAR = 1583
MAX_YEAR = 9999


def validate_region(value: str) -> Region:
    """
    Validate a region code.

    The CLI accepts codes in any case ("by", "By", "BY").

    Raises:
        typer.BadParameter: If the code is unknown
    """
    if not value:
        raise typer.BadParameter("Region cannot be empty")

    code = value.strip().upper()
    if code not in Region._value2member_map_:
        raise typer.BadParameter(
            f"Unknown region '{value}'. Must be one of {', '.join(r.value for r in Region)}"
        )

    return Region(code)


def validate_year(value: int) -> int:
    """
    Validate a calendar year.

    Raises:
        typer.BadParameter: If the year is outside 1583..9999
    """
    if value < MIN_YEAR or value > MAX_YEAR:
        raise typer.BadParameter(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR} (got {value})"
        )
    return value


def validate_date_string(value: str) -> date:
    """
    Validate and parse a date string.

    Accepts YYYY-MM-DD, DD.MM.YYYY and DD/MM/YYYY.

    Raises:
        typer.BadParameter: If the string is not a valid date
    """
    parsed = parse_date(value)
    if parsed is None:
        raise typer.BadParameter(
            f"Invalid date format. Expected YYYY-MM-DD or DD.MM.YYYY (e.g., 2025-12-25), got '{value}'"
        )
    validate_year(parsed.year)
    return parsed


def validate_language(value: str) -> str:
    """
    Validate a language code against the registered translations.

    Raises:
        typer.BadParameter: If no translation is registered for the code
    """
    code = value.strip().lower()
    if not default_registry.has_language(code):
        raise typer.BadParameter(
            f"No translation for '{value}'. Available: {', '.join(default_registry.languages())}"
        )
    return code


# Typer callback functions for use with Option/Argument
def region_callback(value: Optional[str]) -> Optional[Region]:
    """Callback for validating region codes in Typer options."""
    if value is None:
        return None
    return validate_region(value)


def year_callback(value: int) -> int:
    """Callback for validating years in Typer arguments."""
    return validate_year(value)


def date_callback(value: str) -> date:
    """Callback for validating dates in Typer arguments."""
    return validate_date_string(value)


def language_callback(value: Optional[str]) -> Optional[str]:
    """Callback for validating language codes in Typer options."""
    if value is None:
        return None
    return validate_language(value)
