"""Tests for the market price data and PriceRepository."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tameer.data.market_prices import (
    CITY_MARKET_DATA,
    DEFAULT_MARKET_PRICES,
    PAK_CITIES,
    PRICE_HISTORY_DATA,
)
from tameer.data.repository import PriceRepository, get_unit_price
from tameer.factory import create_default_repository
from tameer.models.enums import MaterialType
from tameer.models.prices import MaterialPrice

CORE_MATERIALS = (MaterialType.CEMENT, MaterialType.STEEL, MaterialType.BRICKS)


@pytest.fixture()
def repo() -> PriceRepository:
    return create_default_repository()


# ---------------------------------------------------------------------------
# Seed data integrity
# ---------------------------------------------------------------------------


class TestSeedData:
    def test_default_table_has_core_materials(self) -> None:
        materials = {row.material_type for row in DEFAULT_MARKET_PRICES}
        assert set(CORE_MATERIALS) <= materials

    def test_default_matches_documented_prices(self) -> None:
        for material, price in (
            (MaterialType.CEMENT, 1250.0),
            (MaterialType.STEEL, 265000.0),
            (MaterialType.BRICKS, 18500.0),
        ):
            assert get_unit_price(DEFAULT_MARKET_PRICES, material) == (price, False)

    def test_every_city_table_is_a_supported_city(self) -> None:
        assert set(CITY_MARKET_DATA) <= set(PAK_CITIES)

    def test_no_duplicate_rows(self) -> None:
        for city, table in CITY_MARKET_DATA.items():
            materials = [row.material_type for row in table]
            assert len(materials) == len(set(materials)), f"Duplicate row in {city}"

    def test_all_prices_positive(self) -> None:
        for table in [DEFAULT_MARKET_PRICES, *CITY_MARKET_DATA.values()]:
            assert all(row.price > 0 for row in table)

    def test_price_history_is_monthly(self) -> None:
        assert [p.month for p in PRICE_HISTORY_DATA][:3] == ["Jan", "Feb", "Mar"]
        assert PRICE_HISTORY_DATA[-1].cement == 1240

    def test_price_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            MaterialPrice(material_type=MaterialType.SAND, unit="Trolley", price=0)


# ---------------------------------------------------------------------------
# Repository lookups
# ---------------------------------------------------------------------------


class TestPriceRepository:
    def test_known_city(self, repo: PriceRepository) -> None:
        table, is_default = repo.get_price_table("Lahore")
        assert is_default is False
        assert table == CITY_MARKET_DATA["Lahore"]

    def test_case_and_whitespace_insensitive(self, repo: PriceRepository) -> None:
        _, is_default = repo.get_price_table("  ISLAMABAD ")
        assert is_default is False
        assert repo.has_city_prices("rawalpindi")

    def test_unknown_city_falls_back(self, repo: PriceRepository) -> None:
        table, is_default = repo.get_price_table("Atlantis")
        assert is_default is True
        assert table == DEFAULT_MARKET_PRICES

    def test_returned_table_is_a_copy(self, repo: PriceRepository) -> None:
        table, _ = repo.get_price_table("Lahore")
        table.clear()
        again, _ = repo.get_price_table("Lahore")
        assert len(again) == len(CITY_MARKET_DATA["Lahore"])

    def test_cities_in_display_order(self, repo: PriceRepository) -> None:
        assert repo.cities() == PAK_CITIES

    def test_cities_default_to_table_keys(self) -> None:
        repo = PriceRepository({"Hyderabad": DEFAULT_MARKET_PRICES}, DEFAULT_MARKET_PRICES)
        assert repo.cities() == ["Hyderabad"]
        assert repo.price_history() == []


class TestGetUnitPrice:
    def test_missing_row_uses_default(self) -> None:
        table = [MaterialPrice(material_type=MaterialType.SAND, unit="Trolley", price=9000)]
        assert get_unit_price(table, MaterialType.STEEL) == (265000.0, True)

    def test_no_default_for_non_core_material(self) -> None:
        with pytest.raises(KeyError):
            get_unit_price([], MaterialType.PAINT)
