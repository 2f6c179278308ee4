"""Enums for the Tameer domain models.

Values are snake_case identifiers. Every option also has a display
``label`` matching what the estimator form shows (e.g. ``"Ground + 1"``),
and :func:`parse_option` accepts either spelling.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import TypeVar

from tameer.exceptions import InvalidEnumValueError, InvalidUnitError

_E = TypeVar("_E", bound=StrEnum)


class UnitType(StrEnum):
    """Land area units used for plot sizes in Pakistan."""

    MARLA = "marla"
    KANAL = "kanal"
    SQFT = "sqft"


class FloorOption(StrEnum):
    """Number of storeys above the plinth."""

    GROUND_ONLY = "ground_only"
    GROUND_PLUS_1 = "ground_plus_1"
    GROUND_PLUS_2 = "ground_plus_2"


class QualityTier(StrEnum):
    """Overall construction quality tier."""

    ECONOMY = "economy"
    STANDARD = "standard"
    PREMIUM = "premium"


class SteelGrade(StrEnum):
    """Rebar yield-strength class (ksi)."""

    GRADE_40 = "grade_40"
    GRADE_60 = "grade_60"
    GRADE_75 = "grade_75"


class FloorFinish(StrEnum):
    CONCRETE = "concrete"
    TILES = "tiles"
    MARBLE = "marble"
    GRANITE = "granite"
    WOODEN = "wooden"


class FoundationType(StrEnum):
    """Foundation systems, ordered from shallowest to deepest."""

    SHALLOW_STRIP = "shallow_strip"
    RAFT = "raft"
    PILES = "piles"


class BeamReinforcement(StrEnum):
    STANDARD = "standard"
    HEAVY = "heavy"


class MaterialType(StrEnum):
    """Materials tracked in the market price tables."""

    CEMENT = "cement"
    STEEL = "steel"
    BRICKS = "bricks"
    SAND = "sand"
    CRUSH = "crush"
    PAINT = "paint"
    TILES = "tiles"


class Availability(StrEnum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class PriceTrend(StrEnum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class BreakdownReference(StrEnum):
    """Denominator used for material breakdown percentages."""

    CORE_MATERIALS = "core_materials"
    TOTAL_PROJECT = "total_project"


# Display labels as shown on the estimator form and market screens.
# Keyed per enum class since StrEnum members compare equal to their values.
_LABELS: dict[type[StrEnum], dict[str, str]] = {
    UnitType: {"marla": "Marla", "kanal": "Kanal", "sqft": "SqFt"},
    FloorOption: {
        "ground_only": "Ground Only",
        "ground_plus_1": "Ground + 1",
        "ground_plus_2": "Ground + 2",
    },
    SteelGrade: {
        "grade_40": "Grade 40",
        "grade_60": "Grade 60",
        "grade_75": "Grade 75",
    },
    FoundationType: {
        "shallow_strip": "Shallow/Strip",
        "raft": "Raft",
        "piles": "Piles",
    },
    MaterialType: {"crush": "Crush (Bajri)"},
    Availability: {
        "in_stock": "In Stock",
        "low_stock": "Low Stock",
        "out_of_stock": "Out of Stock",
    },
}


def label_for(option: StrEnum) -> str:
    """Return the display label for an option, falling back to its value."""
    labels = _LABELS.get(type(option), {})
    return labels.get(option.value, option.value.replace("_", " ").title())


def _squash(text: str) -> str:
    return re.sub(r"[^a-z0-9]", "", text.lower())


def parse_option(enum_cls: type[_E], value: object, field: str) -> _E:
    """Coerce *value* into a member of *enum_cls*.

    Accepts a member, its value, its name, or its display label, ignoring
    case and punctuation (``"Ground + 1"``, ``"ground_plus_1"`` and
    ``"GROUND_PLUS_1"`` are all the same option).

    Raises:
        InvalidUnitError: For an unknown ``UnitType``.
        InvalidEnumValueError: For any other unknown option.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = _squash(value)
        if key:
            for member in enum_cls:
                candidates = (member.value, member.name, label_for(member))
                if any(_squash(c) == key for c in candidates):
                    return member
    if enum_cls is UnitType:
        raise InvalidUnitError(value)
    raise InvalidEnumValueError(
        field, value, [label_for(m) for m in enum_cls]
    )
