"""
Global pytest configuration and fixtures.
"""

import pytest

from typso.validator import reset_validator


@pytest.fixture(autouse=True)
def default_validator():
    """Give every test a fresh process default validator.

    Tests that call set_mode() or set_warn_only() would otherwise leak their
    policy into the tests that run after them.
    """
    validator = reset_validator()
    yield validator
    reset_validator()
