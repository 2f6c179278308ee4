"""Cost aggregation: prices quantities and sums the cost components."""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

from tameer.data.coefficients import (
    BATHROOM_FITTING_COST,
    FINISH_LABOR_SURCHARGE,
    FINISH_RATE_PER_SQFT,
    FOUNDATION_RATE_PER_SQFT,
    GRADE_STEEL_PRICE_ADJUSTMENTS,
    GREY_STRUCTURE_RATE_PER_SQFT,
    KITCHEN_FITTING_COST,
    QUALITY_MULTIPLIERS,
)
from tameer.data.repository import get_unit_price
from tameer.exceptions import MissingPriceDataWarning
from tameer.models.enums import MaterialType
from tameer.models.estimate import Assumption, CostBreakdown, UnitPrices
from tameer.models.policy import EstimationPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tameer.models.estimate import QuantityEstimate
    from tameer.models.inputs import ProjectInputs
    from tameer.models.prices import MaterialPrice

logger = logging.getLogger(__name__)


def resolve_unit_prices(
    price_table: Sequence[MaterialPrice],
    assumptions: list[Assumption] | None = None,
) -> UnitPrices:
    """Look up cement, steel and brick prices in a price table.

    Materials missing from the table fall back to the default price. Each
    fallback issues a :class:`MissingPriceDataWarning` and, when an
    *assumptions* list is given, is recorded there.
    """
    prices: dict[MaterialType, float] = {}
    for material in (MaterialType.CEMENT, MaterialType.STEEL, MaterialType.BRICKS):
        price, used_fallback = get_unit_price(price_table, material)
        prices[material] = price
        if not used_fallback:
            continue

        message = (
            f"No price for {material.value} in the price table; "
            f"using default {price:,.0f}"
        )
        logger.warning(message)
        warnings.warn(message, MissingPriceDataWarning, stacklevel=2)
        if assumptions is not None:
            assumptions.append(
                Assumption(
                    parameter=f"{material.value}_price",
                    assumed_value=f"{price:g}",
                    reasoning=message,
                )
            )

    return UnitPrices(
        cement_per_bag=prices[MaterialType.CEMENT],
        steel_per_ton=prices[MaterialType.STEEL],
        bricks_per_thousand=prices[MaterialType.BRICKS],
    )


def adjusted_labor_rate(inputs: ProjectInputs) -> float:
    """Labor rate per sqft including the floor finish surcharge, never below 0."""
    return max(0.0, inputs.labor_rate + FINISH_LABOR_SURCHARGE[inputs.floor_finish])


def aggregate_cost(
    quantities: QuantityEstimate,
    total_area: float,
    inputs: ProjectInputs,
    price_table: Sequence[MaterialPrice],
    policy: EstimationPolicy | None = None,
    assumptions: list[Assumption] | None = None,
) -> CostBreakdown:
    """Price the quantities and compute every cost component.

    Args:
        quantities: Output of the quantity estimator.
        total_area: Total covered area in square feet.
        inputs: The project inputs (quality, grade, finish, fixtures, labor).
        price_table: Material prices for the project's city. May be partial
            or empty; missing rows use default prices.
        policy: Refinement tiers; the baseline policy when omitted.
        assumptions: Optional list that price fallbacks are appended to.

    Returns:
        A CostBreakdown whose ``total`` is the project cost.
    """
    policy = policy or EstimationPolicy()
    unit_prices = resolve_unit_prices(price_table, assumptions)
    quality = QUALITY_MULTIPLIERS[inputs.quality]

    grey_structure = total_area * GREY_STRUCTURE_RATE_PER_SQFT * quality
    steel = (
        quantities.steel_tons
        * unit_prices.steel_per_ton
        * GRADE_STEEL_PRICE_ADJUSTMENTS[inputs.steel_grade]
    )
    cement = quantities.cement_bags * unit_prices.cement_per_bag
    bricks = quantities.brick_count / 1000 * unit_prices.bricks_per_thousand

    finishing = (
        total_area * FINISH_RATE_PER_SQFT[inputs.floor_finish] * quality
        + inputs.bathrooms * BATHROOM_FITTING_COST
        + inputs.kitchens * KITCHEN_FITTING_COST
    )
    labor = total_area * adjusted_labor_rate(inputs)

    foundation = 0.0
    if policy.include_foundation_cost:
        foundation = total_area * FOUNDATION_RATE_PER_SQFT[inputs.foundation_type]

    return CostBreakdown(
        grey_structure=grey_structure,
        steel=steel,
        cement=cement,
        bricks=bricks,
        finishing=finishing,
        labor=labor,
        foundation=foundation,
        unit_prices=unit_prices,
    )
