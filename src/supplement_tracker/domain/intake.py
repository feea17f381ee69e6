"""Domain models for recording intakes."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IntakeEntry:
    """Stored intake log row without its product details."""

    id: str
    user_id: str
    product_id: str
    quantity: float
    logged_at: datetime


@dataclass(frozen=True)
class RegimenLogItem:
    """Checklist state for one product on a regimen day."""

    product_id: str
    checked: bool
    quantity: float


@dataclass(frozen=True)
class RegimenLogResult:
    """Outcome of applying a checklist item."""

    product_id: str
    logged: bool
    intake_id: str | None = None
