"""
This file contains the fixtures that are reusable by any tests within
this directory. You don't need to import the fixtures as pytest will
discover them automatically. More info here:
https://docs.pytest.org/en/latest/fixture.html
"""

import pytest

from paramcheck.config import settings
from paramcheck.validation import SchemaRegistry


@pytest.fixture
def schema_registry():
    return SchemaRegistry()


@pytest.fixture(autouse=True)
def reset_settings():
    """
    Revert the settings changed by a test to their defaults.
    """
    yield
    settings.set("ENABLED", True)
    settings.set("NONE_IS_MISSING", True)
    settings.set("LOG_FAILURES", True)
