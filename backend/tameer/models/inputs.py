"""Project input model for the Tameer cost estimation engine."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from tameer.models.enums import (
    BeamReinforcement,
    FloorFinish,
    FloorOption,
    FoundationType,
    QualityTier,
    SteelGrade,
    UnitType,
    parse_option,
)

_OPTION_FIELDS: dict[str, type] = {
    "unit_type": UnitType,
    "floors": FloorOption,
    "quality": QualityTier,
    "steel_grade": SteelGrade,
    "floor_finish": FloorFinish,
    "foundation_type": FoundationType,
    "beam_reinforcement": BeamReinforcement,
}


class ProjectInputs(BaseModel):
    """Everything the engine needs to price one residential project.

    Instances are immutable; the engine never modifies them. Enumerated
    fields accept display labels such as ``"Ground + 1"`` or
    ``"Shallow/Strip"`` as well as enum members and values.
    """

    model_config = ConfigDict(frozen=True)

    area: float = Field(gt=0, allow_inf_nan=False)
    unit_type: UnitType = UnitType.MARLA
    floors: FloorOption = FloorOption.GROUND_ONLY
    quality: QualityTier = QualityTier.STANDARD
    city: str = "Lahore"
    labor_rate: float = Field(default=450.0, ge=0, le=100_000, allow_inf_nan=False)
    rooms: int = Field(default=3, ge=0, le=1000)
    bathrooms: int = Field(default=3, ge=0, le=1000)
    kitchens: int = Field(default=1, ge=0, le=1000)
    has_garage: bool = False
    has_drawing: bool = False
    has_dining: bool = False
    steel_grade: SteelGrade = SteelGrade.GRADE_60
    floor_finish: FloorFinish = FloorFinish.TILES
    foundation_type: FoundationType = FoundationType.SHALLOW_STRIP
    beam_reinforcement: BeamReinforcement = BeamReinforcement.STANDARD

    @field_validator(*_OPTION_FIELDS, mode="before")
    @classmethod
    def coerce_option(cls, v: Any, info: ValidationInfo) -> Any:
        return parse_option(_OPTION_FIELDS[info.field_name], v, info.field_name)

    @model_validator(mode="after")
    def check_plot_size(self) -> ProjectInputs:
        from tameer.calc.area import normalize_area

        normalize_area(self.area, self.unit_type)
        return self
