"""Market price reference models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tameer.models.enums import Availability, MaterialType, PriceTrend


class MaterialPrice(BaseModel):
    """One row of a city's material price table.

    The engine only reads ``material_type`` and ``price``; the remaining
    fields are market context for display.
    """

    model_config = ConfigDict(frozen=True)

    material_type: MaterialType
    unit: str
    price: float = Field(gt=0)
    availability: Availability = Availability.IN_STOCK
    trend: PriceTrend = PriceTrend.STABLE
    percent_change_24h: float = 0.0
    last_updated: str | None = None


class PricePoint(BaseModel):
    """Monthly national average for the price trend chart."""

    model_config = ConfigDict(frozen=True)

    month: str
    cement: float
    steel: float
