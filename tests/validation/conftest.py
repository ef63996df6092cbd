"""Shared fixtures for validation framework tests."""

from __future__ import annotations

import pytest

from paramcheck.validation import build_custom_validator


@pytest.fixture
def positive():
    return build_custom_validator(lambda x: x > 0, "must be positive")


@pytest.fixture
def integer():
    return build_custom_validator(lambda x: isinstance(x, int), "must be integer")
