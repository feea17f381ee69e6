"""Insight generation from aggregated nutrients."""

from collections.abc import Iterable, Sequence

from supplement_tracker.domain.insights import (
    Insight,
    InsightCategory,
    InsightType,
    InteractionKind,
    InteractionRule,
)
from supplement_tracker.domain.nutrients import AggregatedNutrient
from supplement_tracker.services.rdi import get_rdi_info, is_above_upper_limit
from supplement_tracker.services.reference_data import (
    DEFICIENCY_WATCHLIST,
    NUTRIENT_INTERACTIONS,
)

HIGH_INTAKE_PERCENT = 200
LOW_INTAKE_PERCENT = 25
REDUNDANT_SOURCE_COUNT = 3
WELL_COVERED_RANGE = (50, 150)
WELL_COVERED_MIN_COUNT = 5


def format_amount(amount: float, unit: str) -> str:
    """Format an amount for display, stepping units for large or tiny values."""
    if amount >= 1000 and unit == "mcg":
        return f"{amount / 1000:.1f} mg"
    if amount >= 1000 and unit == "mg":
        return f"{amount / 1000:.1f} g"
    if amount < 0.01:
        return f"{amount * 1000:.1f} {_smaller_unit(unit)}"
    if amount < 1:
        return f"{amount:.2f} {unit}"
    return f"{amount:.1f} {unit}"


def _smaller_unit(unit: str) -> str:
    if unit == "mg":
        return "mcg"
    if unit == "g":
        return "mg"
    return unit


def check_interactions(nutrient_names: Iterable[str]) -> list[InteractionRule]:
    """Return interaction rules whose nutrients are all present."""
    present = set(nutrient_names)
    return [
        rule
        for rule in NUTRIENT_INTERACTIONS
        if all(name in present for name in rule.nutrients)
    ]


def generate_insights(nutrients: Sequence[AggregatedNutrient]) -> list[Insight]:
    """Derive excess, redundancy, deficiency, coverage and interaction insights."""
    insights: list[Insight] = []

    for nutrient in nutrients:
        excess = _excess_insight(nutrient)
        if excess is not None:
            insights.append(excess)
        if len(nutrient.sources) >= REDUNDANT_SOURCE_COUNT:
            insights.append(_redundancy_insight(nutrient))

    by_name: dict[str, AggregatedNutrient] = {}
    for nutrient in nutrients:
        by_name.setdefault(nutrient.name, nutrient)
    for key in DEFICIENCY_WATCHLIST:
        deficiency = _deficiency_insight(key, by_name.get(key))
        if deficiency is not None:
            insights.append(deficiency)

    low, high = WELL_COVERED_RANGE
    well_covered = [
        nutrient
        for nutrient in nutrients
        if nutrient.rdi_percent is not None and low <= nutrient.rdi_percent <= high
    ]
    if len(well_covered) >= WELL_COVERED_MIN_COUNT:
        names = ", ".join(nutrient.name for nutrient in well_covered[:3])
        insights.append(
            Insight(
                type=InsightType.SUCCESS,
                category=InsightCategory.GOOD,
                message="Good nutrient coverage",
                details=(
                    f"You have adequate levels ({low}-{high}% DV) of "
                    f"{len(well_covered)} nutrients including {names}."
                ),
            )
        )

    for rule in check_interactions(nutrient.name for nutrient in nutrients):
        insights.append(_interaction_insight(rule))

    return insights


def _excess_insight(nutrient: AggregatedNutrient) -> Insight | None:
    rdi = get_rdi_info(nutrient.name)
    if rdi is None or nutrient.rdi_percent is None:
        return None
    if (
        is_above_upper_limit(nutrient.name, nutrient.total_amount, nutrient.unit)
        and rdi.upper_limit is not None
    ):
        return Insight(
            type=InsightType.WARNING,
            category=InsightCategory.EXCESS,
            nutrient=nutrient.name,
            message=f"{nutrient.name} exceeds upper intake level",
            details=(
                f"You're getting {format_amount(nutrient.total_amount, nutrient.unit)} "
                f"({nutrient.rdi_percent:.0f}% DV). The tolerable upper limit is "
                f"{format_amount(rdi.upper_limit, rdi.unit)}."
            ),
        )
    if nutrient.rdi_percent > HIGH_INTAKE_PERCENT:
        return Insight(
            type=InsightType.INFO,
            category=InsightCategory.EXCESS,
            nutrient=nutrient.name,
            message=f"High {nutrient.name} intake",
            details=(
                f"You're getting {nutrient.rdi_percent:.0f}% of the daily value. "
                "While this is within safe limits, you may want to review your "
                "sources."
            ),
        )
    return None


def _redundancy_insight(nutrient: AggregatedNutrient) -> Insight:
    products = ", ".join(source.product_name for source in nutrient.sources)
    return Insight(
        type=InsightType.INFO,
        category=InsightCategory.REDUNDANCY,
        nutrient=nutrient.name,
        message=f"{nutrient.name} from multiple sources",
        details=(
            f"You're getting {nutrient.name} from {len(nutrient.sources)} "
            f"different supplements: {products}."
        ),
    )


def _deficiency_insight(
    name: str, nutrient: AggregatedNutrient | None
) -> Insight | None:
    if nutrient is None:
        return Insight(
            type=InsightType.INFO,
            category=InsightCategory.DEFICIENCY,
            nutrient=name,
            message=f"No {name} in your regimen",
            details=(
                f"Consider whether you need {name} supplementation based on your "
                "diet and health needs."
            ),
        )
    if nutrient.rdi_percent is not None and nutrient.rdi_percent < LOW_INTAKE_PERCENT:
        return Insight(
            type=InsightType.INFO,
            category=InsightCategory.DEFICIENCY,
            nutrient=name,
            message=f"Low {name} intake",
            details=(
                f"You're only getting {nutrient.rdi_percent:.0f}% of the daily "
                f"value for {name}."
            ),
        )
    return None


def _interaction_insight(rule: InteractionRule) -> Insight:
    first, second = rule.nutrients
    match rule.kind:
        case InteractionKind.INHIBITS:
            insight_type = InsightType.WARNING
            message = f"{first} and {second} may interact"
        case InteractionKind.CAUTION:
            insight_type = InsightType.WARNING
            message = f"Caution: {first} and {second}"
        case InteractionKind.ENHANCES:
            insight_type = InsightType.INFO
            message = f"{first} enhances {second}"
    return Insight(
        type=insight_type,
        category=InsightCategory.INTERACTION,
        nutrient=f"{first} + {second}",
        message=message,
        details=rule.description,
    )
