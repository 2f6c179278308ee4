"""Price repository for looking up market price tables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tameer.data.coefficients import DEFAULT_UNIT_PRICES

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from tameer.models.enums import MaterialType
    from tameer.models.prices import MaterialPrice, PricePoint

logger = logging.getLogger(__name__)


class PriceRepository:
    """Repository for city material price tables.

    Wraps in-memory price tables keyed by city name and resolves lookups
    with a fallback to the default (national) table. Tables are copied on
    construction and handed out as fresh lists, so callers cannot alter the
    stored data.
    """

    def __init__(
        self,
        city_prices: Mapping[str, Sequence[MaterialPrice]],
        default_prices: Sequence[MaterialPrice],
        cities: Sequence[str] | None = None,
        price_history: Sequence[PricePoint] | None = None,
    ) -> None:
        self._city_prices = {
            self._normalize_city(city): list(table)
            for city, table in city_prices.items()
        }
        self._default_prices = list(default_prices)
        self._cities = list(cities) if cities is not None else list(city_prices)
        self._price_history = list(price_history or [])

    @staticmethod
    def _normalize_city(city: str) -> str:
        return " ".join(city.lower().split())

    def cities(self) -> list[str]:
        """Cities offered to the user, in display order."""
        return list(self._cities)

    def has_city_prices(self, city: str) -> bool:
        return self._normalize_city(city) in self._city_prices

    def get_price_table(self, city: str) -> tuple[list[MaterialPrice], bool]:
        """Get the price table for a city.

        Lookup is case-insensitive and ignores surrounding/repeated spaces.

        Returns a tuple of (table, is_default) where is_default is True when
        the city has no table of its own and the default table was used.
        """
        table = self._city_prices.get(self._normalize_city(city))
        if table is not None:
            return list(table), False

        logger.info("No price table for city %r; using default prices", city)
        return list(self._default_prices), True

    def default_prices(self) -> list[MaterialPrice]:
        return list(self._default_prices)

    def price_history(self) -> list[PricePoint]:
        return list(self._price_history)


def get_unit_price(
    table: Sequence[MaterialPrice],
    material: MaterialType,
) -> tuple[float, bool]:
    """Find a material's unit price in a price table.

    Returns a tuple of (price, used_fallback). When the table has no row for
    the material the documented default price is returned with
    used_fallback=True; an incomplete table never fails the lookup.

    Raises:
        KeyError: If the material has neither a row nor a default price.
    """
    for row in table:
        if row.material_type == material:
            return row.price, False
    return DEFAULT_UNIT_PRICES[material], True
