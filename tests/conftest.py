"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from paramguard.validation import VALIDATORS

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


def _validator_id(key: tuple[str, bool]) -> str:
    family, nullable = key
    return f"{family}-{'nullable' if nullable else 'non_null'}"


@pytest.fixture(params=sorted(VALIDATORS), ids=_validator_id)
def family_validator(request: pytest.FixtureRequest):
    """Each (family, nullable) pair with its named validator."""
    family, nullable = request.param
    return family, nullable, VALIDATORS[request.param]
