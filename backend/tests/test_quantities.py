"""Tests for the quantity estimator."""

from __future__ import annotations

from typing import Any

import pytest

from tameer.calc.quantities import (
    estimate_quantities,
    estimate_steel_tons,
    round_half_up,
    wall_partition_factor,
)
from tameer.models.inputs import ProjectInputs
from tameer.models.policy import EstimationPolicy

# 5 Marla, single storey
AREA = 1125.0


def five_marla_house(**overrides: Any) -> ProjectInputs:
    fields: dict[str, Any] = {
        "area": 5,
        "unit_type": "Marla",
        "rooms": 3,
        "bathrooms": 3,
        "kitchens": 1,
        "floor_finish": "Tiles",
    }
    fields.update(overrides)
    return ProjectInputs(**fields)


class TestWallPartitionFactor:
    def test_zero_rooms_is_neutral(self) -> None:
        assert wall_partition_factor(0) == 1.0

    def test_three_percent_per_room(self) -> None:
        assert wall_partition_factor(3) == pytest.approx(1.09)
        assert wall_partition_factor(10) == pytest.approx(1.30)


class TestRoundHalfUp:
    def test_half_goes_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4

    def test_below_half_goes_down(self) -> None:
        assert round_half_up(564.075) == 564


class TestSteel:
    def test_baseline_single_storey(self) -> None:
        # 1125 sqft * 3.8 kg / 1000
        tons = estimate_steel_tons(AREA, five_marla_house())
        assert tons == pytest.approx(4.275, abs=0.006)

    def test_one_marla_plot(self) -> None:
        # 225 sqft * 3.8 kg / 1000 = 0.855
        tons = estimate_steel_tons(225.0, five_marla_house(area=1))
        assert tons == pytest.approx(0.855, abs=0.006)

    def test_rounded_to_two_decimals(self) -> None:
        tons = estimate_steel_tons(1234.0, five_marla_house())
        assert tons == round(tons, 2)

    def test_base_rate_rises_with_floors(self) -> None:
        single = estimate_steel_tons(AREA, five_marla_house(floors="Ground Only"))
        double = estimate_steel_tons(AREA, five_marla_house(floors="Ground + 1"))
        triple = estimate_steel_tons(AREA, five_marla_house(floors="Ground + 2"))
        assert single < double < triple
        assert triple == pytest.approx(AREA * 5.4 / 1000, abs=0.006)

    def test_heavy_beams(self) -> None:
        tons = estimate_steel_tons(4500.0, five_marla_house(beam_reinforcement="Heavy"))
        assert tons == pytest.approx(4500.0 * 3.8 * 1.18 / 1000, abs=0.006)

    @pytest.mark.parametrize(
        ("foundation", "multiplier"),
        [("Shallow/Strip", 1.0), ("Raft", 1.30), ("Piles", 1.45)],
    )
    def test_foundation_multiplier(self, foundation: str, multiplier: float) -> None:
        tons = estimate_steel_tons(4500.0, five_marla_house(foundation_type=foundation))
        assert tons == pytest.approx(4500.0 * 3.8 * multiplier / 1000, abs=0.006)

    def test_foundation_depth_order(self) -> None:
        tons = [
            estimate_steel_tons(AREA, five_marla_house(foundation_type=f))
            for f in ("Shallow/Strip", "Raft", "Piles")
        ]
        assert tons[0] <= tons[1] <= tons[2]

    def test_grade_40_needs_more_steel(self) -> None:
        grade_60 = estimate_steel_tons(9000.0, five_marla_house(steel_grade="Grade 60"))
        grade_40 = estimate_steel_tons(9000.0, five_marla_house(steel_grade="Grade 40"))
        assert grade_40 > grade_60
        assert grade_40 / grade_60 == pytest.approx(1.22, rel=0.001)

    def test_grade_75_needs_less_steel(self) -> None:
        grade_60 = estimate_steel_tons(9000.0, five_marla_house(steel_grade="Grade 60"))
        grade_75 = estimate_steel_tons(9000.0, five_marla_house(steel_grade="Grade 75"))
        assert grade_75 / grade_60 == pytest.approx(0.88, rel=0.001)

    def test_all_multipliers_combine(self) -> None:
        inputs = five_marla_house(
            floors="Ground + 2",
            beam_reinforcement="Heavy",
            foundation_type="Piles",
            steel_grade="Grade 40",
        )
        expected = 1000.0 * 5.4 * 1.18 * 1.45 * 1.22 / 1000
        assert estimate_steel_tons(1000.0, inputs) == pytest.approx(expected, abs=0.006)


class TestCement:
    def test_tiles_baseline(self) -> None:
        # 1125 * (0.42 + 0.04) * 1.09 = 564.075
        assert estimate_quantities(AREA, five_marla_house()).cement_bags == 564

    @pytest.mark.parametrize(
        ("finish", "factor"),
        [
            ("Concrete", 0.42),
            ("Wooden", 0.42),
            ("Tiles", 0.46),
            ("Marble", 0.49),
            ("Granite", 0.49),
        ],
    )
    def test_finish_surcharge(self, finish: str, factor: float) -> None:
        inputs = five_marla_house(floor_finish=finish, rooms=0)
        bags = estimate_quantities(10_000.0, inputs).cement_bags
        assert bags == round(10_000.0 * factor)

    def test_raft_surcharge(self) -> None:
        inputs = five_marla_house(foundation_type="Raft", floor_finish="Concrete", rooms=0)
        assert estimate_quantities(10_000.0, inputs).cement_bags == 5000

    def test_piles_have_no_cement_surcharge(self) -> None:
        inputs = five_marla_house(foundation_type="Piles", floor_finish="Concrete", rooms=0)
        assert estimate_quantities(10_000.0, inputs).cement_bags == 4200

    def test_more_rooms_more_cement(self) -> None:
        few = estimate_quantities(AREA, five_marla_house(rooms=2)).cement_bags
        many = estimate_quantities(AREA, five_marla_house(rooms=6)).cement_bags
        assert many > few

    def test_fixture_allowances(self) -> None:
        policy = EstimationPolicy(include_fixture_allowances=True)
        base = estimate_quantities(AREA, five_marla_house()).cement_bags
        refined = estimate_quantities(AREA, five_marla_house(), policy).cement_bags
        # 3 bathrooms * 12 + 1 kitchen * 15
        assert refined - base == 51


class TestBricks:
    def test_baseline(self) -> None:
        # 1125 * 28 * 1.09 = 34,335
        assert estimate_quantities(AREA, five_marla_house()).brick_count == 34335

    def test_zero_rooms(self) -> None:
        inputs = five_marla_house(rooms=0)
        assert estimate_quantities(AREA, inputs).brick_count == 31500

    def test_fixture_allowances(self) -> None:
        policy = EstimationPolicy(include_fixture_allowances=True)
        base = estimate_quantities(AREA, five_marla_house()).brick_count
        refined = estimate_quantities(AREA, five_marla_house(), policy).brick_count
        # 3 rooms * 400 + 3 bathrooms * 250
        assert refined - base == 1950
