"""Tests for formatting helpers and EstimationResult summary output."""

from __future__ import annotations

import pytest

from tameer.engine import CostEngine
from tameer.formatting import (
    format_percent,
    format_pkr,
    format_pkr_millions,
    format_quantity,
)
from tameer.models.inputs import ProjectInputs

# ---------- format_pkr ----------


class TestFormatPkr:
    def test_small_amount(self) -> None:
        assert format_pkr(1250) == "Rs. 1,250"

    def test_large_amount(self) -> None:
        assert format_pkr(7_747_997.5) == "Rs. 7,747,998"

    def test_zero(self) -> None:
        assert format_pkr(0) == "Rs. 0"


class TestFormatPkrMillions:
    def test_millions(self) -> None:
        assert format_pkr_millions(7_747_997.5) == "Rs. 7.75M"

    def test_below_a_million(self) -> None:
        assert format_pkr_millions(750_000) == "Rs. 0.75M"


class TestFormatPercent:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(42.4, "42%"), (0.0, "0%"), (100.0, "100%")],
    )
    def test_no_decimals(self, value: float, expected: str) -> None:
        assert format_percent(value) == expected


class TestFormatQuantity:
    def test_whole_number_gets_separators(self) -> None:
        assert format_quantity(34335, "Nos") == "34,335 Nos"
        assert format_quantity(564.0, "Bags") == "564 Bags"

    def test_fraction_keeps_two_decimals(self) -> None:
        assert format_quantity(0.85, "Tons") == "0.85 Tons"

    def test_trailing_zero_trimmed(self) -> None:
        assert format_quantity(4.5, "Tons") == "4.5 Tons"


# ---------- summary dict ----------


class TestSummaryDict:
    def test_summary_fields(self, engine: CostEngine) -> None:
        result = engine.estimate(ProjectInputs(area=5, city="Lahore"))
        summary = result.to_summary_dict()

        assert summary["city"] == "Lahore"
        assert summary["price_source"] == "city"
        assert summary["covered_area_formatted"] == "1,125 sqft"
        assert summary["total_cost_formatted"].startswith("Rs. ")
        assert summary["total_cost_formatted"].endswith("M")
        assert summary["is_feasible"] is True
        assert [m["category"] for m in summary["materials"]] == ["Cement", "Steel", "Bricks"]
        assert summary["materials"][0]["quantity"] == "564 Bags"
        assert summary["num_assumptions"] == 0

    def test_room_features(self, engine: CostEngine) -> None:
        result = engine.estimate(ProjectInputs(area=10, has_garage=True, has_drawing=True))
        summary = result.to_summary_dict()

        assert summary["has_garage"] is True
        assert summary["has_drawing"] is True
        assert summary["has_dining"] is False
