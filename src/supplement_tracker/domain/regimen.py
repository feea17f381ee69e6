"""Domain models for supplement regimens."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegimenItem:
    """Product scheduled within a user's regimen."""

    id: str
    product_id: str
    product_name: str
    quantity: float
    schedule_days: str
    product_brand: str | None = None


@dataclass(frozen=True)
class RegimenStatus:
    """Scheduled items for a day split by whether they were logged."""

    pending: list[RegimenItem]
    completed: list[RegimenItem]

    @property
    def total_count(self) -> int:
        """Number of items scheduled for the day."""
        return len(self.pending) + len(self.completed)
