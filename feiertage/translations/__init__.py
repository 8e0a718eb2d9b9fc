"""
Holiday display names and the registry that serves them.
"""

from feiertage.config import settings
from feiertage.translations.registry import (
    DEFAULT_LANGUAGE,
    TranslationRegistry,
    TranslationTable,
)

# Registry behind the module-level API functions
default_registry = TranslationRegistry(language=settings.default_language)

__all__ = [
    "DEFAULT_LANGUAGE",
    "TranslationRegistry",
    "TranslationTable",
    "default_registry",
]
