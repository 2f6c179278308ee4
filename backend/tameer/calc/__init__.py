"""Calculation stages of the estimation pipeline.

Each stage is a pure function of its arguments:

    normalize_area -> total_covered_area -> estimate_quantities
        -> aggregate_cost -> build_report
"""

from tameer.calc.area import floor_count, normalize_area, total_covered_area
from tameer.calc.costs import aggregate_cost
from tameer.calc.quantities import (
    estimate_quantities,
    estimate_steel_tons,
    wall_partition_factor,
)
from tameer.calc.report import build_report, is_feasible

__all__ = [
    "aggregate_cost",
    "build_report",
    "estimate_quantities",
    "estimate_steel_tons",
    "floor_count",
    "is_feasible",
    "normalize_area",
    "total_covered_area",
    "wall_partition_factor",
]
