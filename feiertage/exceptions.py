"""
Custom exceptions for feiertage.

This module provides:
1. Base exception hierarchy for library-wide error handling
2. Validation exceptions raised at the public API boundary

Validation errors are programmer errors (an unknown region code or holiday
identifier). They are raised before any computation and are not meant to be
retried; the message lists the accepted values so the call site can be fixed.
"""

from typing import Iterable, Optional


# ============================================================================
# Base Exception Hierarchy
# ============================================================================


class FeiertageException(Exception):
    """Base exception class for all feiertage exceptions."""

    pass


class ValidationException(FeiertageException):
    """Base exception for rejected input at the API boundary."""

    pass


class TranslationException(FeiertageException):
    """Exception raised for translation registry errors."""

    pass


# ============================================================================
# Validation Exceptions
# ============================================================================


class InvalidValueError(ValidationException, ValueError):
    """
    Base class for values outside a closed enumeration.

    Attributes:
        kind: Human readable name of the enumeration (e.g. "region")
        value: The rejected value
        allowed: The accepted values, in declaration order
        message: Detailed error message
    """

    kind = "value"

    def __init__(self, value: object, allowed: Iterable[str], message: Optional[str] = None):
        """
        Initialize the exception with the rejected value.

        Args:
            value: The rejected value
            allowed: The accepted values
            message: Optional custom error message
        """
        self.value = value
        self.allowed = tuple(allowed)

        if message is None:
            message = (
                f"Invalid {self.kind}: {value!r}! "
                f"Must be one of {', '.join(self.allowed)}"
            )

        self.message = message
        super().__init__(self.message)

    def __str__(self):
        """Return detailed error message."""
        return self.message


class InvalidRegionError(InvalidValueError):
    """Raised when a region is not one of the known German region codes."""

    kind = "region"


class InvalidHolidayTypeError(InvalidValueError):
    """Raised when a holiday identifier is not a known holiday type."""

    kind = "holiday type"
