"""Configurable refinement tiers for the estimation rule set."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tameer.models.enums import BreakdownReference


class EstimationPolicy(BaseModel):
    """Switches for the optional parts of the canonical rule set.

    The defaults reproduce the baseline estimator: no per-fixture material
    allowances, no foundation earthwork line, and a breakdown of cement,
    steel and bricks measured against their combined cost.
    """

    model_config = ConfigDict(frozen=True)

    include_fixture_allowances: bool = False
    cement_bags_per_bathroom: int = Field(default=12, ge=0)
    cement_bags_per_kitchen: int = Field(default=15, ge=0)
    bricks_per_room: int = Field(default=400, ge=0)
    bricks_per_bathroom: int = Field(default=250, ge=0)

    include_foundation_cost: bool = False
    include_labor_in_breakdown: bool = False
    breakdown_reference: BreakdownReference = BreakdownReference.CORE_MATERIALS
