"""
Pytest configuration and shared fixtures for feiertage tests.
"""

import logging
import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


# Load test environment variables before any feiertage imports
env_file = Path(__file__).parent.parent / ".env.test"
if env_file.exists():
    load_dotenv(env_file, override=True)
else:
    os.environ.setdefault("FEIERTAGE_DEFAULT_LANGUAGE", "de")
    os.environ.setdefault("FEIERTAGE_DEFAULT_REGION", "ALL")
    os.environ.setdefault("FEIERTAGE_LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def reset_translations():
    """Give every test the bundled tables and German as current language."""
    from feiertage.translations import default_registry

    default_registry.reset()
    yield
    default_registry.reset()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging (CLI tests call it)."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        # pytest manages its own capture handlers
        if handler in handlers or type(handler).__module__.startswith("_pytest"):
            continue
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def registry():
    """A private translation registry, independent of the default one."""
    from feiertage.translations import TranslationRegistry

    return TranslationRegistry()
