"""
Pytest configuration and shared fixtures.
backend/ is put on the path by pytest's `pythonpath` setting (pyproject.toml).
"""

import pytest

from helpers import PLAIN_CONFIG, StubMeasurer
from layout import LayoutEngine


@pytest.fixture
def measurer():
    return StubMeasurer()


@pytest.fixture
def engine(measurer):
    return LayoutEngine(measurer, PLAIN_CONFIG)
