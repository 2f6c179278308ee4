"""Seed market price data for Pakistani cities.

Prices are PKR quotes for A-class materials as tracked by the material
tracker screen. ``DEFAULT_MARKET_PRICES`` is the national reference table
used for any city without its own quotes.
"""

from __future__ import annotations

from tameer.models.enums import Availability, MaterialType, PriceTrend
from tameer.models.prices import MaterialPrice, PricePoint

PAK_CITIES: list[str] = [
    "Karachi",
    "Lahore",
    "Islamabad",
    "Rawalpindi",
    "Faisalabad",
    "Multan",
    "Peshawar",
    "Quetta",
    "Gujranwala",
    "Sialkot",
]

_LAST_UPDATED = "2023-10-25"


def _table(
    cement: float,
    steel: float,
    bricks: float,
    sand: float,
    crush: float,
    *,
    cement_trend: PriceTrend = PriceTrend.UP,
    steel_trend: PriceTrend = PriceTrend.DOWN,
    bricks_trend: PriceTrend = PriceTrend.STABLE,
    cement_change: float = 0.0,
    steel_change: float = 0.0,
    cement_availability: Availability = Availability.IN_STOCK,
) -> list[MaterialPrice]:
    return [
        MaterialPrice(
            material_type=MaterialType.CEMENT,
            unit="Bag (50kg)",
            price=cement,
            availability=cement_availability,
            trend=cement_trend,
            percent_change_24h=cement_change,
            last_updated=_LAST_UPDATED,
        ),
        MaterialPrice(
            material_type=MaterialType.STEEL,
            unit="Ton (Grade 60)",
            price=steel,
            trend=steel_trend,
            percent_change_24h=steel_change,
            last_updated=_LAST_UPDATED,
        ),
        MaterialPrice(
            material_type=MaterialType.BRICKS,
            unit="1000 Units (A-Class)",
            price=bricks,
            trend=bricks_trend,
            last_updated=_LAST_UPDATED,
        ),
        MaterialPrice(
            material_type=MaterialType.SAND,
            unit="Trolley",
            price=sand,
            trend=PriceTrend.UP,
            last_updated=_LAST_UPDATED,
        ),
        MaterialPrice(
            material_type=MaterialType.CRUSH,
            unit="Trolley",
            price=crush,
            last_updated=_LAST_UPDATED,
        ),
    ]


DEFAULT_MARKET_PRICES: list[MaterialPrice] = _table(
    1250.0, 265000.0, 18500.0, 9500.0, 14000.0
)

CITY_MARKET_DATA: dict[str, list[MaterialPrice]] = {
    "Lahore": _table(
        1250.0, 265000.0, 18500.0, 9500.0, 14000.0,
        cement_change=0.8, steel_change=-0.4,
    ),
    "Karachi": _table(
        1230.0, 262000.0, 19500.0, 8800.0, 13500.0,
        cement_trend=PriceTrend.STABLE, steel_change=-0.6,
    ),
    "Islamabad": _table(
        1290.0, 268000.0, 19000.0, 10500.0, 15000.0,
        cement_change=1.2, cement_availability=Availability.LOW_STOCK,
    ),
    "Rawalpindi": _table(
        1285.0, 268000.0, 18800.0, 10200.0, 14800.0,
        cement_change=1.1, cement_availability=Availability.LOW_STOCK,
    ),
    "Faisalabad": _table(
        1240.0, 264000.0, 17500.0, 9000.0, 13800.0,
        bricks_trend=PriceTrend.DOWN,
    ),
    "Multan": _table(
        1235.0, 263500.0, 17000.0, 8900.0, 13600.0,
    ),
    "Peshawar": _table(
        1260.0, 266500.0, 18000.0, 9800.0, 14200.0,
        steel_trend=PriceTrend.STABLE,
    ),
}

# National monthly averages shown on the price trend chart.
PRICE_HISTORY_DATA: list[PricePoint] = [
    PricePoint(month="Jan", cement=1050, steel=220000),
    PricePoint(month="Feb", cement=1080, steel=235000),
    PricePoint(month="Mar", cement=1100, steel=250000),
    PricePoint(month="Apr", cement=1150, steel=280000),
    PricePoint(month="May", cement=1200, steel=275000),
    PricePoint(month="Jun", cement=1220, steel=270000),
    PricePoint(month="Jul", cement=1240, steel=265000),
]
