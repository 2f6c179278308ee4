"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

from tameer.data.market_prices import (
    CITY_MARKET_DATA,
    DEFAULT_MARKET_PRICES,
    PAK_CITIES,
    PRICE_HISTORY_DATA,
)
from tameer.data.repository import PriceRepository
from tameer.engine import CostEngine
from tameer.models.policy import EstimationPolicy


def create_default_repository() -> PriceRepository:
    """Create a PriceRepository loaded with the built-in market data."""
    return PriceRepository(
        CITY_MARKET_DATA,
        DEFAULT_MARKET_PRICES,
        cities=PAK_CITIES,
        price_history=PRICE_HISTORY_DATA,
    )


def create_default_engine(policy: EstimationPolicy | None = None) -> CostEngine:
    """Create a CostEngine wired up with the built-in market data.

    This is the recommended way to create a CostEngine for typical usage.

    Example::

        from tameer import ProjectInputs, create_default_engine

        engine = create_default_engine()
        result = engine.estimate(ProjectInputs(area=10, unit_type="Marla"))
    """
    return CostEngine(create_default_repository(), policy)
