"""Service for recording and removing intake logs."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol

from supplement_tracker.domain.intake import (
    IntakeEntry,
    RegimenLogItem,
    RegimenLogResult,
)

_logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Raised when a referenced record does not exist."""


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: str) -> None:
        super().__init__("Product not found")
        self.product_id = product_id


class IntakeNotFoundError(NotFoundError):
    def __init__(self, intake_id: str) -> None:
        super().__init__("Intake not found")
        self.intake_id = intake_id


class IntakeLogRepository(Protocol):
    """Persistence interface for writing intake logs."""

    def user_exists(self, user_id: str) -> bool:
        """Return True if the user exists."""

    def product_exists(self, product_id: str) -> bool:
        """Return True if the product exists."""

    def create_intake(
        self, user_id: str, product_id: str, quantity: float, logged_at: datetime
    ) -> IntakeEntry:
        """Insert an intake log and return it."""

    def find_intake(
        self, user_id: str, product_id: str, start: datetime, end: datetime
    ) -> IntakeEntry | None:
        """Return one intake of the product logged in ``[start, end)``."""

    def delete_intake(self, intake_id: str) -> bool:
        """Delete an intake log, returning False when nothing matched."""


@dataclass
class IntakeService:
    """Service that records intakes directly or from a regimen checklist."""

    repository: IntakeLogRepository

    def log_intake(
        self,
        user_id: str,
        product_id: str,
        quantity: float = 1.0,
        on_day: date | None = None,
    ) -> IntakeEntry:
        """Log a product intake at midnight UTC of ``on_day`` or now."""
        if not self.repository.user_exists(user_id):
            raise UserNotFoundError(user_id)
        if not self.repository.product_exists(product_id):
            raise ProductNotFoundError(product_id)
        logged_at = (
            _day_start(on_day) if on_day is not None else datetime.now(tz=UTC)
        )
        entry = self.repository.create_intake(user_id, product_id, quantity, logged_at)
        _logger.info(
            "Intake logged: user_id=%s product_id=%s intake_id=%s",
            user_id,
            product_id,
            entry.id,
        )
        return entry

    def delete_intake(self, intake_id: str) -> None:
        if not self.repository.delete_intake(intake_id):
            raise IntakeNotFoundError(intake_id)

    def log_regimen_day(
        self, user_id: str, on_day: date, items: Sequence[RegimenLogItem]
    ) -> list[RegimenLogResult]:
        """Sync the day's intakes with a regimen checklist.

        Checked items without an intake for the day get one; unchecked items
        lose the intake they have. Everything else is reported unchanged.
        """
        start = _day_start(on_day)
        end = start + timedelta(days=1)
        results = []
        for item in items:
            existing = self.repository.find_intake(user_id, item.product_id, start, end)
            if item.checked and existing is None:
                entry = self.repository.create_intake(
                    user_id, item.product_id, item.quantity, start
                )
                results.append(RegimenLogResult(item.product_id, True, entry.id))
            elif not item.checked and existing is not None:
                self.repository.delete_intake(existing.id)
                results.append(RegimenLogResult(item.product_id, False))
            else:
                results.append(
                    RegimenLogResult(
                        item.product_id,
                        existing is not None,
                        existing.id if existing else None,
                    )
                )
        return results


def _day_start(value: date) -> datetime:
    return datetime.combine(value, time.min, tzinfo=UTC)
