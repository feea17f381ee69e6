"""Nutrient domain models."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class NutrientRecord:
    """One nutrient entry attached to a product."""

    name: str
    amount: float
    unit: str


@dataclass(frozen=True)
class IntakeRecord:
    """A product taken with a quantity multiplier."""

    product_name: str
    quantity: float
    nutrients: Sequence[NutrientRecord] = ()


@dataclass(frozen=True)
class IntakeLogRow:
    """Persisted intake log with its product nutrients."""

    id: str
    product_id: str
    product_name: str
    quantity: float
    logged_on: date
    nutrients: tuple[NutrientRecord, ...] = ()

    def to_intake_record(self) -> IntakeRecord:
        """Return the aggregation view of this row."""
        return IntakeRecord(
            product_name=self.product_name,
            quantity=self.quantity,
            nutrients=self.nutrients,
        )


@dataclass(frozen=True)
class RdiEntry:
    """Reference daily intake for a canonical nutrient."""

    amount: float
    unit: str
    upper_limit: float | None = None


@dataclass(frozen=True)
class ConvertedAmount:
    """Result of a unit conversion."""

    amount: float
    unit: str


@dataclass(frozen=True)
class NutrientSource:
    """Contribution of a single product to an aggregated nutrient."""

    product_name: str
    amount: float


@dataclass(frozen=True)
class AggregatedNutrient:
    """Nutrient total across intake records."""

    name: str
    total_amount: float
    unit: str
    rdi_amount: float | None = None
    rdi_percent: float | None = None
    sources: tuple[NutrientSource, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NutrientSummary:
    """Aggregated nutrients for a user and date range."""

    nutrients: list[AggregatedNutrient]
    intake_count: int
