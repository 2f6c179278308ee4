"""Feasibility check and material breakdown reporting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tameer.calc.area import floor_count
from tameer.data.coefficients import MIN_SQFT_PER_ROOM, RULE_SET_VERSION
from tameer.formatting import format_quantity
from tameer.models.enums import BreakdownReference, MaterialType, label_for
from tameer.models.estimate import (
    EstimateMetadata,
    EstimationResult,
    MaterialBreakdownItem,
)
from tameer.models.policy import EstimationPolicy

if TYPE_CHECKING:
    from tameer.models.estimate import Assumption, CostBreakdown, QuantityEstimate
    from tameer.models.inputs import ProjectInputs

ENGINE_VERSION = "0.1.0"


def is_feasible(total_area: float, rooms: int) -> bool:
    """A layout is plausible when each room gets over 150 sqft on average."""
    return total_area > rooms * MIN_SQFT_PER_ROOM


def percent_of(cost: float, reference: float) -> float:
    """Share of *reference* as a percentage; 0 when the reference is not positive."""
    if reference <= 0:
        return 0.0
    return cost / reference * 100.0


def _breakdown_rows(
    quantities: QuantityEstimate,
    costs: CostBreakdown,
    total_area: float,
    include_labor: bool,
) -> list[tuple[str, float, str, float]]:
    rows = [
        (label_for(MaterialType.CEMENT), float(quantities.cement_bags), "Bags", costs.cement),
        (label_for(MaterialType.STEEL), quantities.steel_tons, "Tons", costs.steel),
        (label_for(MaterialType.BRICKS), float(quantities.brick_count), "Nos", costs.bricks),
    ]
    if include_labor:
        rows.append(("Labor", total_area, "sqft", costs.labor))
    return rows


def build_report(
    inputs: ProjectInputs,
    sqft_per_floor: float,
    total_area: float,
    quantities: QuantityEstimate,
    costs: CostBreakdown,
    *,
    price_source: str,
    policy: EstimationPolicy | None = None,
    assumptions: list[Assumption] | None = None,
) -> EstimationResult:
    """Assemble the final EstimationResult.

    Breakdown rows are ordered Cement, Steel, Bricks, then Labor when the
    policy includes it. With ``BreakdownReference.CORE_MATERIALS`` the
    percentages are measured against the sum of the listed rows and add up
    to 100; with ``TOTAL_PROJECT`` they are shares of the project total.
    """
    policy = policy or EstimationPolicy()
    rows = _breakdown_rows(
        quantities, costs, total_area, policy.include_labor_in_breakdown
    )

    if policy.breakdown_reference == BreakdownReference.TOTAL_PROJECT:
        reference = costs.total
    else:
        reference = sum(cost for _, _, _, cost in rows)

    breakdown = [
        MaterialBreakdownItem(
            category=category,
            quantity=quantity,
            unit=unit,
            quantity_label=format_quantity(quantity, unit),
            cost=cost,
            percent_of_reference=percent_of(cost, reference),
        )
        for category, quantity, unit, cost in rows
    ]

    return EstimationResult(
        city=inputs.city,
        price_source=price_source,
        sqft_per_floor=sqft_per_floor,
        floor_count=floor_count(inputs.floors),
        total_covered_area_sqft=total_area,
        quantities=quantities,
        costs=costs,
        total_project_cost=costs.total,
        material_breakdown=breakdown,
        is_feasible=is_feasible(total_area, inputs.rooms),
        has_garage=inputs.has_garage,
        has_drawing=inputs.has_drawing,
        has_dining=inputs.has_dining,
        assumptions=list(assumptions or []),
        metadata=EstimateMetadata(
            engine_version=ENGINE_VERSION,
            rule_set_version=RULE_SET_VERSION,
            breakdown_reference=policy.breakdown_reference.value,
        ),
    )
