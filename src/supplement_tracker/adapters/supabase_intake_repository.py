"""Supabase repository for intake logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from supabase import Client

from supplement_tracker.domain.intake import IntakeEntry
from supplement_tracker.domain.nutrients import IntakeLogRow, NutrientRecord
from supplement_tracker.services.intake import IntakeLogRepository
from supplement_tracker.services.nutrients import IntakeRepository

_INTAKE_COLUMNS = (
    "id, product_id, quantity, date, "
    "products(name, product_nutrients(name, amount, unit))"
)
_ENTRY_COLUMNS = "id, user_id, product_id, quantity, date"


@dataclass
class SupabaseIntakeRepository(IntakeRepository, IntakeLogRepository):
    """Supabase implementation for intake log queries and writes."""

    client: Client

    def list_intakes(
        self, user_id: str | None, start: datetime, end: datetime
    ) -> list[IntakeLogRow]:
        """Return intake logs with product nutrients in the time range."""
        query = (
            self.client.table("intake_logs")
            .select(_INTAKE_COLUMNS)
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
        )
        if user_id is not None:
            query = query.eq("user_id", user_id)
        response = query.order("date", desc=False).execute()
        return [_parse_row(row) for row in response.data or []]

    def user_exists(self, user_id: str) -> bool:
        return self._exists("users", user_id)

    def product_exists(self, product_id: str) -> bool:
        return self._exists("products", product_id)

    def create_intake(
        self, user_id: str, product_id: str, quantity: float, logged_at: datetime
    ) -> IntakeEntry:
        """Insert an intake log row and return it."""
        response = (
            self.client.table("intake_logs")
            .insert(
                {
                    "user_id": user_id,
                    "product_id": product_id,
                    "quantity": quantity,
                    "date": logged_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create intake log")
        return _parse_entry(response.data[0])

    def find_intake(
        self, user_id: str, product_id: str, start: datetime, end: datetime
    ) -> IntakeEntry | None:
        """Return the first intake of a product in the time range."""
        response = (
            self.client.table("intake_logs")
            .select(_ENTRY_COLUMNS)
            .eq("user_id", user_id)
            .eq("product_id", product_id)
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def delete_intake(self, intake_id: str) -> bool:
        """Delete an intake log row by id."""
        response = (
            self.client.table("intake_logs").delete().eq("id", intake_id).execute()
        )
        return bool(response.data)

    def _exists(self, table: str, row_id: str) -> bool:
        response = (
            self.client.table(table).select("id").eq("id", row_id).limit(1).execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> IntakeLogRow:
    product = row.get("products") or {}
    if not isinstance(product, dict):
        product = {}
    raw_nutrients = product.get("product_nutrients") or []
    return IntakeLogRow(
        id=str(row.get("id", "")),
        product_id=str(row.get("product_id", "")),
        product_name=str(product.get("name") or ""),
        quantity=_parse_quantity(row.get("quantity")),
        logged_on=_parse_logged_on(row.get("date")),
        nutrients=tuple(
            _parse_nutrient(nutrient)
            for nutrient in raw_nutrients
            if isinstance(nutrient, dict)
        ),
    )


def _parse_entry(row: dict[str, object]) -> IntakeEntry:
    return IntakeEntry(
        id=str(row.get("id", "")),
        user_id=str(row.get("user_id", "")),
        product_id=str(row.get("product_id", "")),
        quantity=_parse_quantity(row.get("quantity")),
        logged_at=_parse_timestamp(row.get("date")),
    )


def _parse_nutrient(row: dict[str, object]) -> NutrientRecord:
    return NutrientRecord(
        name=str(row.get("name", "")),
        amount=float(row.get("amount") or 0.0),
        unit=str(row.get("unit", "")),
    )


def _parse_quantity(raw: object) -> float:
    return float(raw) if raw is not None else 1.0


def _parse_timestamp(raw: object) -> datetime:
    if not isinstance(raw, str) or not raw:
        raise RuntimeError("Intake log is missing its date")
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _parse_logged_on(raw: object) -> date:
    """Return the UTC calendar day of a stored intake timestamp."""
    return _parse_timestamp(raw).date()
