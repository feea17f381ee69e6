"""Nutrient aggregation across intake records."""

from collections.abc import Iterable
from dataclasses import replace

from supplement_tracker.domain.nutrients import (
    AggregatedNutrient,
    IntakeRecord,
    NutrientSource,
)
from supplement_tracker.services.normalization import normalize_nutrient_name
from supplement_tracker.services.rdi import calculate_rdi_percent, get_rdi_info


def aggregate_nutrients(
    records: Iterable[IntakeRecord],
) -> dict[str, AggregatedNutrient]:
    """Sum scaled nutrient amounts per canonical name.

    Sources are kept in the order records and their nutrients are visited.
    Each entry keeps the unit of its first contribution.
    """
    totals: dict[str, AggregatedNutrient] = {}
    for record in records:
        for nutrient in record.nutrients:
            name = normalize_nutrient_name(nutrient.name)
            amount = nutrient.amount * record.quantity
            source = NutrientSource(product_name=record.product_name, amount=amount)
            existing = totals.get(name)
            if existing is None:
                rdi = get_rdi_info(name)
                totals[name] = AggregatedNutrient(
                    name=name,
                    total_amount=amount,
                    unit=nutrient.unit,
                    rdi_amount=rdi.amount if rdi else None,
                    sources=(source,),
                )
                continue
            totals[name] = replace(
                existing,
                total_amount=existing.total_amount + amount,
                sources=(*existing.sources, source),
            )

    return {
        name: replace(
            entry,
            rdi_percent=calculate_rdi_percent(
                entry.name, entry.total_amount, entry.unit
            ),
        )
        for name, entry in totals.items()
    }


def sort_by_name(nutrients: Iterable[AggregatedNutrient]) -> list[AggregatedNutrient]:
    """Return nutrients ordered by name, ignoring case."""
    return sorted(nutrients, key=lambda nutrient: nutrient.name.casefold())
