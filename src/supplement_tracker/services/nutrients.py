"""Nutrient summary service for logged intakes."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from supplement_tracker.domain.insights import Insight
from supplement_tracker.domain.nutrients import IntakeLogRow, NutrientSummary
from supplement_tracker.services.aggregation import aggregate_nutrients, sort_by_name
from supplement_tracker.services.insights import generate_insights

_logger = logging.getLogger(__name__)


class IntakeRepository(Protocol):
    """Persistence interface for intake logs."""

    def list_intakes(
        self, user_id: str | None, start: datetime, end: datetime
    ) -> list[IntakeLogRow]:
        """Return intake logs with product nutrients in ``[start, end)``."""


@dataclass
class NutrientService:
    """Service that aggregates logged intakes into nutrient totals."""

    repository: IntakeRepository
    debug: bool = False

    def summarize(
        self, user_id: str | None, start: datetime, end: datetime
    ) -> NutrientSummary:
        """Return aggregated nutrients sorted by name."""
        logs = self.repository.list_intakes(user_id, start, end)
        aggregated = aggregate_nutrients(log.to_intake_record() for log in logs)
        if self.debug:
            _logger.info(
                "Nutrient summary: user_id=%s intakes=%s nutrients=%s",
                user_id,
                len(logs),
                len(aggregated),
            )
        return NutrientSummary(
            nutrients=sort_by_name(aggregated.values()),
            intake_count=len(logs),
        )

    def insights(
        self, user_id: str | None, start: datetime, end: datetime
    ) -> list[Insight]:
        """Return insights for the intakes in the range."""
        summary = self.summarize(user_id, start, end)
        return generate_insights(summary.nutrients)
