"""
Shared pytest fixtures and configuration for Fynctions tests.
"""

import pytest

from tests.utils import IsEven


@pytest.fixture
def letters():
    """Provide a fresh mapping for tests that need one."""
    return {"a": 1, "b": 2}


@pytest.fixture
def is_even():
    """Provide a picklable predicate object."""
    return IsEven()
