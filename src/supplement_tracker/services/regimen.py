"""Regimen reminder service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol

from supplement_tracker.domain.regimen import RegimenItem, RegimenStatus
from supplement_tracker.services.schedule import day_of_week, is_scheduled_for_day


class RegimenRepository(Protocol):
    """Persistence interface for regimens and the intakes logged against them."""

    def list_regimen_items(self, user_id: str) -> list[RegimenItem]:
        """Return all regimen items for a user."""

    def list_logged_product_ids(
        self, user_id: str, start: datetime, end: datetime
    ) -> set[str]:
        """Return product ids with an intake logged in ``[start, end)``."""


@dataclass
class RegimenService:
    """Service that checks which scheduled items are still pending."""

    repository: RegimenRepository

    def check_pending(self, user_id: str, on_day: date | None = None) -> RegimenStatus:
        """Split items scheduled for the day into pending and completed."""
        day = on_day or datetime.now(tz=UTC).date()
        items = self.repository.list_regimen_items(user_id)
        if not items:
            return RegimenStatus(pending=[], completed=[])

        weekday = day_of_week(day)
        scheduled = [
            item for item in items if is_scheduled_for_day(item.schedule_days, weekday)
        ]
        start = datetime.combine(day, time.min, tzinfo=UTC)
        logged = self.repository.list_logged_product_ids(
            user_id, start, start + timedelta(days=1)
        )
        return RegimenStatus(
            pending=[item for item in scheduled if item.product_id not in logged],
            completed=[item for item in scheduled if item.product_id in logged],
        )
