"""Shared fixtures for the Tameer test suite."""

from __future__ import annotations

import pytest

from tameer.engine import CostEngine
from tameer.factory import create_default_engine


@pytest.fixture()
def engine() -> CostEngine:
    """CostEngine wired to the built-in market data."""
    return create_default_engine()
