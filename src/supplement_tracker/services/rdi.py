"""Percent-of-daily-value calculations."""

from supplement_tracker.domain.nutrients import ConvertedAmount, RdiEntry
from supplement_tracker.services.normalization import (
    convert_unit,
    normalize_nutrient_name,
)
from supplement_tracker.services.reference_data import NUTRIENT_RDI


def get_rdi_info(nutrient_name: str) -> RdiEntry | None:
    """Return the reference daily intake for a nutrient, if known."""
    return NUTRIENT_RDI.get(normalize_nutrient_name(nutrient_name))


def calculate_rdi_percent(nutrient_name: str, amount: float, unit: str) -> float | None:
    """Return the percent of daily value, or None if it can't be computed."""
    rdi = get_rdi_info(nutrient_name)
    if rdi is None:
        return None
    converted = _convert_to_rdi_unit(nutrient_name, amount, unit, rdi)
    if converted is None:
        return None
    return (converted.amount / rdi.amount) * 100


def is_above_upper_limit(nutrient_name: str, amount: float, unit: str) -> bool:
    """Return True if the amount strictly exceeds the tolerable upper limit."""
    rdi = get_rdi_info(nutrient_name)
    if rdi is None or rdi.upper_limit is None:
        return False
    converted = _convert_to_rdi_unit(nutrient_name, amount, unit, rdi)
    if converted is None:
        return False
    return converted.amount > rdi.upper_limit


def _convert_to_rdi_unit(
    nutrient_name: str, amount: float, unit: str, rdi: RdiEntry
) -> ConvertedAmount | None:
    converted = convert_unit(
        amount, unit, rdi.unit, normalize_nutrient_name(nutrient_name)
    )
    if converted.unit.lower() != rdi.unit.lower():
        return None
    return converted
