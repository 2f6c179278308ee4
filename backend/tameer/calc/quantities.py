"""Material quantity estimation from covered area.

Quantities come from empirical per-sqft coefficients (see
:mod:`tameer.data.coefficients`), adjusted for the structural and finish
choices in the project inputs.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tameer.calc.area import floor_count
from tameer.data.coefficients import (
    BEAM_STEEL_MULTIPLIERS,
    BRICKS_PER_SQFT,
    CEMENT_BAGS_PER_SQFT,
    FINISH_CEMENT_SURCHARGE,
    FOUNDATION_CEMENT_SURCHARGE,
    FOUNDATION_STEEL_MULTIPLIERS,
    GRADE_STEEL_MULTIPLIERS,
    STEEL_KG_PER_SQFT,
    WALL_PARTITION_FACTOR_PER_ROOM,
)
from tameer.models.estimate import QuantityEstimate
from tameer.models.policy import EstimationPolicy

if TYPE_CHECKING:
    from tameer.models.inputs import ProjectInputs


def round_half_up(value: float) -> int:
    """Round a non-negative quantity to the nearest whole unit, .5 going up."""
    return math.floor(value + 0.5)


def wall_partition_factor(rooms: int) -> float:
    """Extra partition walling and plaster for the number of rooms."""
    return 1 + rooms * WALL_PARTITION_FACTOR_PER_ROOM


def estimate_steel_tons(total_area: float, inputs: ProjectInputs) -> float:
    """Rebar tonnage, rounded to 2 decimals."""
    kg_per_sqft = STEEL_KG_PER_SQFT[floor_count(inputs.floors)]
    multiplier = (
        BEAM_STEEL_MULTIPLIERS[inputs.beam_reinforcement]
        * FOUNDATION_STEEL_MULTIPLIERS[inputs.foundation_type]
        * GRADE_STEEL_MULTIPLIERS[inputs.steel_grade]
    )
    return round(total_area * kg_per_sqft * multiplier / 1000, 2)


def estimate_cement_bags(
    total_area: float,
    inputs: ProjectInputs,
    policy: EstimationPolicy,
) -> int:
    factor = (
        CEMENT_BAGS_PER_SQFT
        + FINISH_CEMENT_SURCHARGE[inputs.floor_finish]
        + FOUNDATION_CEMENT_SURCHARGE[inputs.foundation_type]
    )
    bags = round_half_up(total_area * factor * wall_partition_factor(inputs.rooms))
    if policy.include_fixture_allowances:
        bags += (
            inputs.bathrooms * policy.cement_bags_per_bathroom
            + inputs.kitchens * policy.cement_bags_per_kitchen
        )
    return bags


def estimate_brick_count(
    total_area: float,
    inputs: ProjectInputs,
    policy: EstimationPolicy,
) -> int:
    bricks = round_half_up(
        total_area * BRICKS_PER_SQFT * wall_partition_factor(inputs.rooms)
    )
    if policy.include_fixture_allowances:
        bricks += (
            inputs.rooms * policy.bricks_per_room
            + inputs.bathrooms * policy.bricks_per_bathroom
        )
    return bricks


def estimate_quantities(
    total_area: float,
    inputs: ProjectInputs,
    policy: EstimationPolicy | None = None,
) -> QuantityEstimate:
    """Estimate steel (tons), cement (bags) and bricks (count).

    Args:
        total_area: Total covered area in square feet.
        inputs: The project inputs supplying structural and finish choices.
        policy: Refinement tiers; the baseline policy when omitted.
    """
    policy = policy or EstimationPolicy()
    return QuantityEstimate(
        steel_tons=estimate_steel_tons(total_area, inputs),
        cement_bags=estimate_cement_bags(total_area, inputs, policy),
        brick_count=estimate_brick_count(total_area, inputs, policy),
    )
