"""Tameer construction cost estimator for residential projects in Pakistan.

Usage::

    from tameer import ProjectInputs, create_default_engine

    engine = create_default_engine()
    result = engine.estimate(ProjectInputs(area=5, unit_type="Marla", city="Lahore"))
"""

from tameer.engine import CostEngine
from tameer.exceptions import (
    InvalidEnumValueError,
    InvalidInputError,
    InvalidUnitError,
    MissingPriceDataWarning,
    TameerError,
)
from tameer.factory import create_default_engine, create_default_repository
from tameer.models.enums import (
    BeamReinforcement,
    BreakdownReference,
    FloorFinish,
    FloorOption,
    FoundationType,
    MaterialType,
    QualityTier,
    SteelGrade,
    UnitType,
)
from tameer.models.estimate import (
    Assumption,
    CostBreakdown,
    EstimationResult,
    MaterialBreakdownItem,
    QuantityEstimate,
)
from tameer.models.inputs import ProjectInputs
from tameer.models.policy import EstimationPolicy
from tameer.models.prices import MaterialPrice

__all__ = [
    "Assumption",
    "BeamReinforcement",
    "BreakdownReference",
    "CostBreakdown",
    "CostEngine",
    "EstimationPolicy",
    "EstimationResult",
    "FloorFinish",
    "FloorOption",
    "FoundationType",
    "InvalidEnumValueError",
    "InvalidInputError",
    "InvalidUnitError",
    "MaterialBreakdownItem",
    "MaterialPrice",
    "MaterialType",
    "MissingPriceDataWarning",
    "ProjectInputs",
    "QualityTier",
    "QuantityEstimate",
    "SteelGrade",
    "TameerError",
    "UnitType",
    "create_default_engine",
    "create_default_repository",
]
