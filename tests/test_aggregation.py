"""Tests for nutrient aggregation."""

import pytest

from supplement_tracker.domain.nutrients import (
    IntakeRecord,
    NutrientRecord,
    NutrientSource,
)
from supplement_tracker.services.aggregation import aggregate_nutrients, sort_by_name


def test_aggregate_sums_scaled_amounts_in_order() -> None:
    records = [
        IntakeRecord(
            product_name="Product A",
            quantity=2,
            nutrients=[NutrientRecord("Vitamin C", 45, "mg")],
        ),
        IntakeRecord(
            product_name="Product B",
            quantity=1,
            nutrients=[NutrientRecord("Vitamin C", 30, "mg")],
        ),
    ]

    result = aggregate_nutrients(records)

    vitamin_c = result["Vitamin C"]
    assert vitamin_c.total_amount == 120
    assert vitamin_c.sources == (
        NutrientSource("Product A", 90),
        NutrientSource("Product B", 30),
    )
    assert vitamin_c.rdi_amount == 90
    assert vitamin_c.rdi_percent == pytest.approx(133.333, rel=1e-4)


def test_aggregate_merges_aliases_under_canonical_name() -> None:
    records = [
        IntakeRecord(
            product_name="Multi",
            quantity=1,
            nutrients=[
                NutrientRecord("vitamin d", 10, "mcg"),
                NutrientRecord("Zinc", 5, "mg"),
            ],
        ),
        IntakeRecord(
            product_name="D3",
            quantity=1,
            nutrients=[NutrientRecord("Vitamin D", 10, "mcg")],
        ),
    ]

    result = aggregate_nutrients(records)

    assert list(result) == ["Vitamin D", "Zinc"]
    assert result["Vitamin D"].total_amount == 20
    assert [source.product_name for source in result["Vitamin D"].sources] == [
        "Multi",
        "D3",
    ]
    assert result["Vitamin D"].rdi_percent == pytest.approx(100)


def test_aggregate_total_matches_sum_of_sources() -> None:
    records = [
        IntakeRecord("A", 0.5, [NutrientRecord("Magnesium", 133.3, "mg")]),
        IntakeRecord("B", 3, [NutrientRecord("Magnesium", 41.7, "mg")]),
        IntakeRecord("C", 1.5, [NutrientRecord("Magnesium", 12.1, "mg")]),
    ]

    magnesium = aggregate_nutrients(records)["Magnesium"]

    running = 0.0
    for source in magnesium.sources:
        running += source.amount
    assert magnesium.total_amount == running


def test_aggregate_keeps_unknown_nutrients_without_rdi() -> None:
    records = [IntakeRecord("Herbal", 1, [NutrientRecord("Ginkgo Biloba", 120, "mg")])]

    ginkgo = aggregate_nutrients(records)["Ginkgo Biloba"]

    assert ginkgo.rdi_amount is None
    assert ginkgo.rdi_percent is None
    assert ginkgo.unit == "mg"


def test_aggregate_suppresses_percent_for_unconvertible_units() -> None:
    records = [IntakeRecord("K2", 1, [NutrientRecord("Vitamin K", 100, "IU")])]

    vitamin_k = aggregate_nutrients(records)["Vitamin K"]

    assert vitamin_k.rdi_amount == 120
    assert vitamin_k.rdi_percent is None


def test_aggregate_empty_inputs() -> None:
    assert aggregate_nutrients([]) == {}
    assert aggregate_nutrients([IntakeRecord("Empty", 1, [])]) == {}


def test_sort_by_name_ignores_case() -> None:
    records = [
        IntakeRecord(
            "Mix",
            1,
            [
                NutrientRecord("Zinc", 1, "mg"),
                NutrientRecord("biotin extract", 1, "mcg"),
                NutrientRecord("Calcium", 1, "mg"),
            ],
        )
    ]

    names = [n.name for n in sort_by_name(aggregate_nutrients(records).values())]

    assert names == ["biotin extract", "Calcium", "Zinc"]
