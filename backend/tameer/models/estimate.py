"""Estimation output models for the Tameer cost estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from tameer.models.enums import MaterialType


class QuantityEstimate(BaseModel):
    """Bulk material quantities for the whole covered area."""

    model_config = ConfigDict(frozen=True)

    steel_tons: float = Field(ge=0)
    cement_bags: int = Field(ge=0)
    brick_count: int = Field(ge=0)


class UnitPrices(BaseModel):
    """Resolved unit prices actually used for one calculation (PKR)."""

    model_config = ConfigDict(frozen=True)

    cement_per_bag: float
    steel_per_ton: float
    bricks_per_thousand: float


class CostBreakdown(BaseModel):
    """Cost components in PKR. ``total`` is the sum of every component."""

    model_config = ConfigDict(frozen=True)

    grey_structure: float = Field(ge=0)
    steel: float = Field(ge=0)
    cement: float = Field(ge=0)
    bricks: float = Field(ge=0)
    finishing: float = Field(ge=0)
    labor: float = Field(ge=0)
    foundation: float = Field(default=0.0, ge=0)
    unit_prices: UnitPrices

    @computed_field  # type: ignore[prop-decorator]
    @property
    def core_material_total(self) -> float:
        return self.cement + self.steel + self.bricks

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return (
            self.grey_structure
            + self.steel
            + self.cement
            + self.bricks
            + self.finishing
            + self.labor
            + self.foundation
        )


class MaterialBreakdownItem(BaseModel):
    """A single row of the material breakdown panel."""

    model_config = ConfigDict(frozen=True)

    category: str
    quantity: float
    unit: str
    quantity_label: str
    cost: float
    percent_of_reference: float


class Assumption(BaseModel):
    """A documented fallback or default made during estimation."""

    model_config = ConfigDict(frozen=True)

    parameter: str
    assumed_value: str
    reasoning: str


class EstimateMetadata(BaseModel):
    """Metadata about the rule set that produced an estimate."""

    model_config = ConfigDict(frozen=True)

    engine_version: str
    rule_set_version: str
    breakdown_reference: str
    estimation_method: str = "covered_area_coefficients"
    currency: str = "PKR"


class EstimationResult(BaseModel):
    """Complete estimate for one set of project inputs.

    Contains no timestamps or other run-specific values, so two calls with
    the same inputs and prices compare equal.
    """

    model_config = ConfigDict(frozen=True)

    city: str
    price_source: str
    sqft_per_floor: float
    floor_count: int
    total_covered_area_sqft: float = Field(gt=0)
    quantities: QuantityEstimate
    costs: CostBreakdown
    total_project_cost: float = Field(gt=0)
    material_breakdown: list[MaterialBreakdownItem]
    is_feasible: bool
    has_garage: bool = False
    has_drawing: bool = False
    has_dining: bool = False
    assumptions: list[Assumption] = Field(default_factory=list)
    metadata: EstimateMetadata

    @computed_field  # type: ignore[prop-decorator]
    @property
    def steel_tons(self) -> float:
        return self.quantities.steel_tons

    @property
    def cement_bags(self) -> int:
        return self.quantities.cement_bags

    @property
    def brick_count(self) -> int:
        return self.quantities.brick_count

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cost_per_sqft(self) -> float:
        return self.total_project_cost / self.total_covered_area_sqft

    def breakdown_item(self, category: MaterialType | str) -> MaterialBreakdownItem | None:
        """Return the breakdown row for *category*, if present."""
        for item in self.material_breakdown:
            if item.category.lower() == str(category).lower():
                return item
        return None

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from tameer.formatting import (
            format_percent,
            format_pkr,
            format_pkr_millions,
        )

        return {
            "city": self.city,
            "price_source": self.price_source,
            "covered_area_formatted": f"{self.total_covered_area_sqft:,.0f} sqft",
            "total_cost_formatted": format_pkr_millions(self.total_project_cost),
            "total_cost_exact_formatted": format_pkr(self.total_project_cost),
            "cost_per_sqft_formatted": format_pkr(self.cost_per_sqft),
            "steel_tons": self.steel_tons,
            "is_feasible": self.is_feasible,
            "has_garage": self.has_garage,
            "has_drawing": self.has_drawing,
            "has_dining": self.has_dining,
            "materials": [
                {
                    "category": item.category,
                    "quantity": item.quantity_label,
                    "cost_formatted": format_pkr_millions(item.cost),
                    "percent_formatted": format_percent(item.percent_of_reference),
                }
                for item in self.material_breakdown
            ],
            "num_assumptions": len(self.assumptions),
        }
