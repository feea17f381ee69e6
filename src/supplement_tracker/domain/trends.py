"""Domain models for nutrient trends."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyNutrientAmount:
    """Total of one nutrient on one day."""

    name: str
    amount: float
    unit: str
    rdi_percent: float | None = None


@dataclass(frozen=True)
class TrendPoint:
    """All nutrient totals for a single day."""

    day: date
    nutrients: list[DailyNutrientAmount]


@dataclass(frozen=True)
class NutrientTrendSummary:
    """Statistics for one nutrient across a period."""

    name: str
    unit: str
    average: float
    min: float
    max: float
    days_with_intake: int
    average_rdi_percent: float | None = None


@dataclass(frozen=True)
class TrendReport:
    """Daily trend data and per-nutrient statistics."""

    period: int
    start_date: date
    end_date: date
    data: list[TrendPoint]
    summary: list[NutrientTrendSummary]
