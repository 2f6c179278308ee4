"""Plot area normalization and covered-area calculation."""

from __future__ import annotations

import math

from tameer.data.coefficients import (
    FLOOR_COUNTS,
    MAX_PLOT_AREA_SQFT,
    UNIT_CONVERSIONS,
    UPPER_FLOOR_AREA_FACTOR,
)
from tameer.models.enums import FloorOption, UnitType, parse_option


def normalize_area(area: float, unit_type: UnitType | str) -> float:
    """Convert a plot area to square feet per floor.

    No rounding is applied.

    Raises:
        InvalidUnitError: If *unit_type* is not Marla, Kanal or SqFt.
        ValueError: If *area* is not a positive finite number or the plot
            exceeds MAX_PLOT_AREA_SQFT.
    """
    unit = parse_option(UnitType, unit_type, "unit_type")
    if not math.isfinite(area) or area <= 0:
        msg = f"area must be a positive finite number, got {area}"
        raise ValueError(msg)
    sqft = area * UNIT_CONVERSIONS[unit]
    if sqft > MAX_PLOT_AREA_SQFT:
        msg = (
            f"plot area of {sqft:,.0f} sqft exceeds the "
            f"{MAX_PLOT_AREA_SQFT:,.0f} sqft limit"
        )
        raise ValueError(msg)
    return sqft


def floor_count(floors: FloorOption | str) -> int:
    option = parse_option(FloorOption, floors, "floors")
    return FLOOR_COUNTS[option]


def total_covered_area(sqft_per_floor: float, floors: FloorOption | str) -> float:
    """Total covered area across all floors.

    Upper floors count for 85% of the ground footprint, so the result is an
    approximation and is smaller than ``floor_count * sqft_per_floor`` for
    multi-storey houses.
    """
    count = floor_count(floors)
    return sqft_per_floor * (1 + (count - 1) * UPPER_FLOOR_AREA_FACTOR)
