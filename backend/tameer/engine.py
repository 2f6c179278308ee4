"""Core cost estimation engine for the Tameer estimator.

The CostEngine runs a fixed, linear pipeline for every estimate:

1. **Unit normalization**: plot area in Marla/Kanal/SqFt to sqft per floor.
2. **Covered area**: upper floors add 85% of the ground footprint each.
3. **Quantities**: steel tons, cement bags and brick count from empirical
   per-sqft coefficients, adjusted for structure and finishes.
4. **Costing**: quantities priced from the city's market table (default
   table and default prices as fallbacks), plus grey structure, finishing,
   labor and optional foundation lines.
5. **Reporting**: material breakdown with percentages and a feasibility
   flag, with every fallback recorded as an assumption.

The engine holds no per-estimate state; the same inputs and price data
always produce an equal result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tameer.calc.area import normalize_area, total_covered_area
from tameer.calc.costs import aggregate_cost
from tameer.calc.quantities import estimate_quantities
from tameer.calc.report import build_report
from tameer.models.estimate import Assumption
from tameer.models.policy import EstimationPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tameer.data.repository import PriceRepository
    from tameer.models.estimate import EstimationResult
    from tameer.models.inputs import ProjectInputs
    from tameer.models.prices import MaterialPrice

logger = logging.getLogger(__name__)


class CostEngine:
    """Converts ProjectInputs into an EstimationResult.

    Args:
        repository: Source of city price tables.
        policy: Refinement tiers for the rule set. Defaults to the baseline
            policy.

    Example::

        from tameer.data import CITY_MARKET_DATA, DEFAULT_MARKET_PRICES
        from tameer.data.repository import PriceRepository

        repo = PriceRepository(CITY_MARKET_DATA, DEFAULT_MARKET_PRICES)
        engine = CostEngine(repo)
        result = engine.estimate(ProjectInputs(area=5, city="Lahore"))
    """

    def __init__(
        self,
        repository: PriceRepository,
        policy: EstimationPolicy | None = None,
    ) -> None:
        self._repository = repository
        self._policy = policy or EstimationPolicy()

    @property
    def repository(self) -> PriceRepository:
        return self._repository

    @property
    def policy(self) -> EstimationPolicy:
        return self._policy

    def estimate(self, inputs: ProjectInputs) -> EstimationResult:
        """Estimate a project using the price table for ``inputs.city``.

        Unknown cities use the default price table; this is recorded as an
        assumption rather than raised.

        Raises:
            InvalidUnitError: If the unit type is not recognized.
            InvalidEnumValueError: If any other option is not recognized.
        """
        assumptions: list[Assumption] = []
        price_table, is_default = self._repository.get_price_table(inputs.city)
        if is_default:
            assumptions.append(
                Assumption(
                    parameter="city",
                    assumed_value="default",
                    reasoning=(
                        f"No market prices for '{inputs.city}'; "
                        f"used the national default price table"
                    ),
                )
            )
        return self._run(
            inputs,
            price_table,
            price_source="default" if is_default else "city",
            assumptions=assumptions,
        )

    def estimate_with_prices(
        self,
        inputs: ProjectInputs,
        prices: Sequence[MaterialPrice],
    ) -> EstimationResult:
        """Estimate a project against an explicit price table.

        The table may be partial or empty; missing materials use default
        prices.
        """
        return self._run(inputs, prices, price_source="supplied", assumptions=[])

    def _run(
        self,
        inputs: ProjectInputs,
        price_table: Sequence[MaterialPrice],
        *,
        price_source: str,
        assumptions: list[Assumption],
    ) -> EstimationResult:
        # 1-2. Area
        sqft_per_floor = normalize_area(inputs.area, inputs.unit_type)
        total_area = total_covered_area(sqft_per_floor, inputs.floors)

        # 3. Quantities
        quantities = estimate_quantities(total_area, inputs, self._policy)

        # 4. Costs
        costs = aggregate_cost(
            quantities,
            total_area,
            inputs,
            price_table,
            policy=self._policy,
            assumptions=assumptions,
        )

        # 5. Report
        result = build_report(
            inputs,
            sqft_per_floor,
            total_area,
            quantities,
            costs,
            price_source=price_source,
            policy=self._policy,
            assumptions=assumptions,
        )
        logger.info(
            "Estimated %.0f sqft in %s: PKR %.0f (%d assumptions)",
            total_area,
            inputs.city,
            result.total_project_cost,
            len(result.assumptions),
        )
        return result
