"""Reference data layer for the Tameer cost estimation engine."""

from tameer.data.market_prices import (
    CITY_MARKET_DATA,
    DEFAULT_MARKET_PRICES,
    PAK_CITIES,
    PRICE_HISTORY_DATA,
)
from tameer.data.repository import PriceRepository, get_unit_price

__all__ = [
    "CITY_MARKET_DATA",
    "DEFAULT_MARKET_PRICES",
    "PAK_CITIES",
    "PRICE_HISTORY_DATA",
    "PriceRepository",
    "get_unit_price",
]
