"""Canonical coefficient tables for the estimation rule set.

All rates are empirical rules of thumb for brick-and-RCC residential work in
Punjab and Sindh, in PKR where they are prices. They are tunable policy
values, not physical constants.
"""

from __future__ import annotations

from tameer.models.enums import (
    BeamReinforcement,
    FloorFinish,
    FloorOption,
    FoundationType,
    MaterialType,
    QualityTier,
    SteelGrade,
    UnitType,
)

RULE_SET_VERSION = "2024.1"

# --- Area -------------------------------------------------------------------

# Square feet per unit of plot area.
UNIT_CONVERSIONS: dict[UnitType, float] = {
    UnitType.MARLA: 225.0,
    UnitType.KANAL: 4500.0,
    UnitType.SQFT: 1.0,
}

# Largest plot footprint the rule set is calibrated for (about 222 Kanal).
MAX_PLOT_AREA_SQFT = 1_000_000.0

FLOOR_COUNTS: dict[FloorOption, int] = {
    FloorOption.GROUND_ONLY: 1,
    FloorOption.GROUND_PLUS_1: 2,
    FloorOption.GROUND_PLUS_2: 3,
}

# Share of the ground footprint each upper floor adds (stairwells, voids).
UPPER_FLOOR_AREA_FACTOR = 0.85

# --- Steel ------------------------------------------------------------------

# kg of rebar per sqft of covered area, by floor count.
STEEL_KG_PER_SQFT: dict[int, float] = {1: 3.8, 2: 4.6, 3: 5.4}

BEAM_STEEL_MULTIPLIERS: dict[BeamReinforcement, float] = {
    BeamReinforcement.STANDARD: 1.0,
    BeamReinforcement.HEAVY: 1.18,
}

FOUNDATION_STEEL_MULTIPLIERS: dict[FoundationType, float] = {
    FoundationType.SHALLOW_STRIP: 1.0,
    FoundationType.RAFT: 1.30,
    FoundationType.PILES: 1.45,
}

# Lower grades need more cross-section for the same strength.
GRADE_STEEL_MULTIPLIERS: dict[SteelGrade, float] = {
    SteelGrade.GRADE_40: 1.22,
    SteelGrade.GRADE_60: 1.0,
    SteelGrade.GRADE_75: 0.88,
}

# Market price of each grade relative to the Grade 60 quote.
GRADE_STEEL_PRICE_ADJUSTMENTS: dict[SteelGrade, float] = {
    SteelGrade.GRADE_40: 0.93,
    SteelGrade.GRADE_60: 1.0,
    SteelGrade.GRADE_75: 1.0,
}

# --- Cement -----------------------------------------------------------------

CEMENT_BAGS_PER_SQFT = 0.42

# Extra bags/sqft for the floor finish bedding layer.
FINISH_CEMENT_SURCHARGE: dict[FloorFinish, float] = {
    FloorFinish.CONCRETE: 0.0,
    FloorFinish.TILES: 0.04,
    FloorFinish.MARBLE: 0.07,
    FloorFinish.GRANITE: 0.07,
    FloorFinish.WOODEN: 0.0,
}

FOUNDATION_CEMENT_SURCHARGE: dict[FoundationType, float] = {
    FoundationType.SHALLOW_STRIP: 0.0,
    FoundationType.RAFT: 0.08,
    FoundationType.PILES: 0.0,
}

# Each room adds 3% more partition walling and plaster.
WALL_PARTITION_FACTOR_PER_ROOM = 0.03

# --- Bricks -----------------------------------------------------------------

BRICKS_PER_SQFT = 28

# --- Pricing ----------------------------------------------------------------

# Used when a price table has no row for a material.
DEFAULT_UNIT_PRICES: dict[MaterialType, float] = {
    MaterialType.CEMENT: 1250.0,  # per 50 kg bag
    MaterialType.STEEL: 265000.0,  # per ton
    MaterialType.BRICKS: 18500.0,  # per 1000
}

GREY_STRUCTURE_RATE_PER_SQFT = 1800.0

QUALITY_MULTIPLIERS: dict[QualityTier, float] = {
    QualityTier.ECONOMY: 0.88,
    QualityTier.STANDARD: 1.0,
    QualityTier.PREMIUM: 1.45,
}

FINISH_RATE_PER_SQFT: dict[FloorFinish, float] = {
    FloorFinish.CONCRETE: 1400.0,
    FloorFinish.TILES: 2200.0,
    FloorFinish.MARBLE: 3100.0,
    FloorFinish.GRANITE: 4200.0,
    FloorFinish.WOODEN: 3600.0,
}

BATHROOM_FITTING_COST = 60000.0
KITCHEN_FITTING_COST = 90000.0

# Added to the caller's labor rate (PKR/sqft).
FINISH_LABOR_SURCHARGE: dict[FloorFinish, float] = {
    FloorFinish.CONCRETE: -40.0,
    FloorFinish.TILES: 0.0,
    FloorFinish.MARBLE: 80.0,
    FloorFinish.GRANITE: 120.0,
    FloorFinish.WOODEN: 60.0,
}

# Earthwork and machinery (PKR/sqft); only with include_foundation_cost.
FOUNDATION_RATE_PER_SQFT: dict[FoundationType, float] = {
    FoundationType.SHALLOW_STRIP: 0.0,
    FoundationType.RAFT: 180.0,
    FoundationType.PILES: 420.0,
}

# --- Feasibility ------------------------------------------------------------

MIN_SQFT_PER_ROOM = 150.0
