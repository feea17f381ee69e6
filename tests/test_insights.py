"""Tests for insight generation."""

import pytest

from supplement_tracker.domain.insights import (
    InsightCategory,
    InsightType,
    InteractionKind,
)
from supplement_tracker.domain.nutrients import (
    AggregatedNutrient,
    IntakeRecord,
    NutrientRecord,
    NutrientSource,
)
from supplement_tracker.services.aggregation import aggregate_nutrients
from supplement_tracker.services.insights import (
    check_interactions,
    format_amount,
    generate_insights,
)


def _nutrient(
    name: str,
    total: float,
    unit: str,
    percent: float | None,
    sources: tuple[str, ...] = ("Multi",),
) -> AggregatedNutrient:
    return AggregatedNutrient(
        name=name,
        total_amount=total,
        unit=unit,
        rdi_percent=percent,
        sources=tuple(
            NutrientSource(product_name=source, amount=total / len(sources))
            for source in sources
        ),
    )


def _watchlist_covered() -> list[AggregatedNutrient]:
    return [
        _nutrient("Vitamin D", 20, "mcg", 100),
        _nutrient("Vitamin B12", 2.4, "mcg", 100),
        _nutrient("Iron", 9, "mg", 50),
        _nutrient("Calcium", 500, "mg", 50),
        _nutrient("Omega-3", 1600, "mg", 100),
    ]


@pytest.mark.parametrize(
    ("amount", "unit", "expected"),
    [
        (1500, "mcg", "1.5 mg"),
        (2500, "mg", "2.5 g"),
        (0.005, "mg", "5.0 mcg"),
        (0.004, "g", "4.0 mg"),
        (0.5, "mg", "0.50 mg"),
        (12.34, "mg", "12.3 mg"),
        (999, "mcg", "999.0 mcg"),
    ],
)
def test_format_amount(amount: float, unit: str, expected: str) -> None:
    assert format_amount(amount, unit) == expected


def test_calcium_above_upper_limit_warns_without_high_intake_info() -> None:
    nutrients = [_nutrient("Calcium", 2600, "mg", 260)]

    insights = generate_insights(nutrients)

    calcium = [i for i in insights if i.nutrient == "Calcium"]
    assert [(i.type, i.category) for i in calcium] == [
        (InsightType.WARNING, InsightCategory.EXCESS)
    ]
    assert calcium[0].message == "Calcium exceeds upper intake level"
    assert calcium[0].details == (
        "You're getting 2.6 g (260% DV). The tolerable upper limit is 2.5 g."
    )


def test_high_intake_within_limit_is_info() -> None:
    insights = generate_insights([_nutrient("Vitamin B12", 1000, "mcg", 41667)])

    high = [i for i in insights if i.category == InsightCategory.EXCESS]
    assert len(high) == 1
    assert high[0].type == InsightType.INFO
    assert high[0].message == "High Vitamin B12 intake"


def test_redundancy_lists_products_in_source_order() -> None:
    nutrients = [
        _nutrient("Zinc", 15, "mg", 136, sources=("Multi", "Zinc Lozenge", "ZMA")),
    ]

    insights = generate_insights(nutrients)

    redundancy = [i for i in insights if i.category == InsightCategory.REDUNDANCY]
    assert len(redundancy) == 1
    assert redundancy[0].message == "Zinc from multiple sources"
    assert redundancy[0].details == (
        "You're getting Zinc from 3 different supplements: Multi, Zinc Lozenge, ZMA."
    )


def test_missing_iron_is_reported_as_deficiency() -> None:
    nutrients = [n for n in _watchlist_covered() if n.name != "Iron"]

    insights = generate_insights(nutrients)

    deficiencies = [i for i in insights if i.category == InsightCategory.DEFICIENCY]
    iron = [i for i in deficiencies if i.nutrient == "Iron"]
    assert len(iron) == 1
    assert "No Iron in your regimen" in iron[0].message


def test_low_intake_is_reported_in_watchlist_order() -> None:
    nutrients = [
        _nutrient("Magnesium", 42, "mg", 10),
        _nutrient("Vitamin D", 2, "mcg", 10),
    ]

    insights = generate_insights(nutrients)

    deficiencies = [i for i in insights if i.category == InsightCategory.DEFICIENCY]
    assert [(i.nutrient, i.message) for i in deficiencies] == [
        ("Vitamin D", "Low Vitamin D intake"),
        ("Vitamin B12", "No Vitamin B12 in your regimen"),
        ("Iron", "No Iron in your regimen"),
        ("Calcium", "No Calcium in your regimen"),
        ("Magnesium", "Low Magnesium intake"),
        ("Omega-3", "No Omega-3 in your regimen"),
    ]
    assert deficiencies[0].details == (
        "You're only getting 10% of the daily value for Vitamin D."
    )


def test_present_watchlist_nutrient_without_percent_is_not_deficient() -> None:
    nutrients = [*_watchlist_covered(), _nutrient("Magnesium", 2, "tablets", None)]

    insights = generate_insights(nutrients)

    assert not [i for i in insights if i.category == InsightCategory.DEFICIENCY]


def test_good_coverage_summarizes_first_three() -> None:
    nutrients = [
        _nutrient("Vitamin C", 90, "mg", 100),
        _nutrient("Zinc", 11, "mg", 100),
        *_watchlist_covered(),
    ]

    insights = generate_insights(nutrients)

    good = [i for i in insights if i.category == InsightCategory.GOOD]
    assert len(good) == 1
    assert good[0].type == InsightType.SUCCESS
    assert good[0].nutrient is None
    assert good[0].details == (
        "You have adequate levels (50-150% DV) of 7 nutrients including "
        "Vitamin C, Zinc, Vitamin D."
    )


def test_interactions_follow_table_order() -> None:
    nutrients = [
        _nutrient("Iron", 18, "mg", 100),
        _nutrient("Vitamin C", 90, "mg", 100),
        _nutrient("Calcium", 1000, "mg", 100),
    ]

    insights = generate_insights(nutrients)

    interactions = [i for i in insights if i.category == InsightCategory.INTERACTION]
    assert [(i.type, i.message, i.nutrient) for i in interactions] == [
        (
            InsightType.WARNING,
            "Calcium and Iron may interact",
            "Calcium + Iron",
        ),
        (InsightType.INFO, "Vitamin C enhances Iron", "Vitamin C + Iron"),
    ]


def test_caution_interaction_message() -> None:
    nutrients = [
        _nutrient("Vitamin E", 15, "mg", 100),
        _nutrient("Vitamin K", 120, "mcg", 100),
    ]

    insights = generate_insights(nutrients)

    caution = [i for i in insights if i.category == InsightCategory.INTERACTION]
    assert caution[0].type == InsightType.WARNING
    assert caution[0].message == "Caution: Vitamin E and Vitamin K"


def test_check_interactions_requires_both_nutrients() -> None:
    rules = check_interactions(["Vitamin D", "Calcium", "Zinc"])

    assert [(rule.nutrients, rule.kind) for rule in rules] == [
        (("Calcium", "Zinc"), InteractionKind.INHIBITS),
        (("Vitamin D", "Calcium"), InteractionKind.ENHANCES),
    ]
    assert check_interactions(["Iron"]) == []


def test_rule_order_runs_excess_redundancy_then_deficiency() -> None:
    aggregated = aggregate_nutrients(
        [
            IntakeRecord("D3 5000", 1, [NutrientRecord("Vitamin D", 5000, "IU")]),
            IntakeRecord("Multi", 1, [NutrientRecord("Vitamin D", 400, "IU")]),
            IntakeRecord("Calcium + D", 1, [NutrientRecord("Vitamin D", 10, "mcg")]),
        ]
    )

    insights = generate_insights(list(aggregated.values()))

    assert [i.category for i in insights[:3]] == [
        InsightCategory.EXCESS,
        InsightCategory.REDUNDANCY,
        InsightCategory.DEFICIENCY,
    ]
    assert insights[0].type == InsightType.WARNING
    assert insights[0].nutrient == "Vitamin D"
    assert insights[2].nutrient == "Vitamin B12"


def test_empty_input_reports_whole_watchlist() -> None:
    insights = generate_insights([])

    assert len(insights) == 6
    assert all(i.category == InsightCategory.DEFICIENCY for i in insights)
