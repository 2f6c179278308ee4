"""Domain models for the Tameer cost estimation engine."""

from tameer.models.enums import (
    Availability,
    BeamReinforcement,
    BreakdownReference,
    FloorFinish,
    FloorOption,
    FoundationType,
    MaterialType,
    PriceTrend,
    QualityTier,
    SteelGrade,
    UnitType,
    label_for,
    parse_option,
)
from tameer.models.estimate import (
    Assumption,
    CostBreakdown,
    EstimateMetadata,
    EstimationResult,
    MaterialBreakdownItem,
    QuantityEstimate,
    UnitPrices,
)
from tameer.models.inputs import ProjectInputs
from tameer.models.policy import EstimationPolicy
from tameer.models.prices import MaterialPrice, PricePoint

__all__ = [
    "Assumption",
    "Availability",
    "BeamReinforcement",
    "BreakdownReference",
    "CostBreakdown",
    "EstimateMetadata",
    "EstimationPolicy",
    "EstimationResult",
    "FloorFinish",
    "FloorOption",
    "FoundationType",
    "MaterialBreakdownItem",
    "MaterialPrice",
    "MaterialType",
    "PricePoint",
    "PriceTrend",
    "ProjectInputs",
    "QualityTier",
    "QuantityEstimate",
    "SteelGrade",
    "UnitPrices",
    "UnitType",
    "label_for",
    "parse_option",
]
