"""Nutrient trends over a rolling period."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from supplement_tracker.config import DEFAULT_TREND_PERIODS
from supplement_tracker.domain.nutrients import IntakeLogRow
from supplement_tracker.domain.trends import (
    DailyNutrientAmount,
    NutrientTrendSummary,
    TrendPoint,
    TrendReport,
)
from supplement_tracker.services.normalization import normalize_nutrient_name
from supplement_tracker.services.nutrients import IntakeRepository
from supplement_tracker.services.rdi import calculate_rdi_percent

_logger = logging.getLogger(__name__)


class InvalidPeriodError(ValueError):
    """Raised when a trend period is not one of the allowed values."""

    def __init__(self, period: int, allowed: Iterable[int]) -> None:
        allowed_text = ", ".join(str(value) for value in allowed)
        super().__init__(f"period must be one of {allowed_text}")
        self.period = period


@dataclass
class TrendService:
    """Service for per-day nutrient trends."""

    repository: IntakeRepository
    allowed_periods: tuple[int, ...] = DEFAULT_TREND_PERIODS
    debug: bool = False

    def get_trends(
        self, user_id: str, period: int, today: date | None = None
    ) -> TrendReport:
        """Return daily totals and summary statistics ending today (UTC)."""
        if period not in self.allowed_periods:
            raise InvalidPeriodError(period, self.allowed_periods)
        end_day = today or datetime.now(tz=UTC).date()
        start_day = end_day - timedelta(days=period - 1)
        start = datetime.combine(start_day, time.min, tzinfo=UTC)
        end = datetime.combine(end_day + timedelta(days=1), time.min, tzinfo=UTC)
        logs = self.repository.list_intakes(user_id, start, end)
        if self.debug:
            _logger.info(
                "Trends: user_id=%s period=%s intakes=%s", user_id, period, len(logs)
            )
        return build_trend_report(logs, start_day, period)


def build_trend_report(
    logs: Iterable[IntakeLogRow], start: date, period: int
) -> TrendReport:
    """Group intake logs by day and compute per-nutrient statistics."""
    days: dict[date, dict[str, tuple[float, str]]] = {
        start + timedelta(days=offset): {} for offset in range(period)
    }
    for log in logs:
        day_totals = days.get(log.logged_on)
        if day_totals is None:
            continue
        for nutrient in log.nutrients:
            name = normalize_nutrient_name(nutrient.name)
            amount = nutrient.amount * log.quantity
            if name in day_totals:
                total, unit = day_totals[name]
                day_totals[name] = (total + amount, unit)
            else:
                day_totals[name] = (amount, nutrient.unit)

    data = [
        TrendPoint(
            day=day,
            nutrients=[
                DailyNutrientAmount(
                    name=name,
                    amount=amount,
                    unit=unit,
                    rdi_percent=calculate_rdi_percent(name, amount, unit) or None,
                )
                for name, (amount, unit) in totals.items()
            ],
        )
        for day, totals in sorted(days.items())
    ]

    amounts_by_name: dict[str, tuple[list[float], str]] = {}
    for totals in days.values():
        for name, (amount, unit) in totals.items():
            amounts_by_name.setdefault(name, ([], unit))[0].append(amount)

    summary = [
        _summarize(name, amounts, unit)
        for name, (amounts, unit) in amounts_by_name.items()
    ]
    summary.sort(key=lambda entry: entry.name.casefold())

    return TrendReport(
        period=period,
        start_date=start,
        end_date=start + timedelta(days=period - 1),
        data=data,
        summary=summary,
    )


def _summarize(name: str, amounts: list[float], unit: str) -> NutrientTrendSummary:
    non_zero = [amount for amount in amounts if amount > 0]
    average = sum(non_zero) / len(non_zero) if non_zero else 0.0
    return NutrientTrendSummary(
        name=name,
        unit=unit,
        average=average,
        min=min(non_zero) if non_zero else 0.0,
        max=max(non_zero) if non_zero else 0.0,
        days_with_intake=len(non_zero),
        average_rdi_percent=calculate_rdi_percent(name, average, unit) or None,
    )
