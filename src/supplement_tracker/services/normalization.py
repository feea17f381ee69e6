"""Nutrient name normalization and unit conversion."""

import re

from supplement_tracker.domain.nutrients import ConvertedAmount
from supplement_tracker.services.reference_data import (
    IU_CONVERSIONS,
    MASS_CONVERSIONS,
    NUTRIENT_ALIASES,
)

_WHITESPACE = re.compile(r"\s+")
_MICRO_GRAM_SPELLINGS = ("µg", "μg")


def normalize_nutrient_name(name: str) -> str:
    """Map an alias to its canonical name, or return the input unchanged."""
    key = _WHITESPACE.sub("-", name.lower())
    return NUTRIENT_ALIASES.get(key, name)


def normalize_unit(unit: str) -> str:
    """Lowercase a unit and spell micrograms as mcg."""
    lowered = unit.lower()
    for spelling in _MICRO_GRAM_SPELLINGS:
        lowered = lowered.replace(spelling, "mcg")
    return lowered


def convert_unit(
    amount: float, from_unit: str, to_unit: str, nutrient_name: str | None = None
) -> ConvertedAmount:
    """Convert an amount to another unit.

    International units are converted only for vitamins with a known factor,
    and always land in that vitamin's fixed unit regardless of ``to_unit``.
    When no conversion is known the original amount and unit are returned;
    callers detect this by comparing the resulting unit.
    """
    from_key = normalize_unit(from_unit)
    to_key = normalize_unit(to_unit)

    if from_key == "iu" and nutrient_name in IU_CONVERSIONS:
        factor, unit = IU_CONVERSIONS[nutrient_name]
        return ConvertedAmount(amount=amount * factor, unit=unit)

    if from_key == to_key:
        return ConvertedAmount(amount=amount, unit=to_unit)

    factor = MASS_CONVERSIONS.get(to_key, {}).get(from_key)
    if factor:
        return ConvertedAmount(amount=amount * factor, unit=to_unit)

    return ConvertedAmount(amount=amount, unit=from_unit)
