"""Supabase repository for regimens."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from supplement_tracker.domain.regimen import RegimenItem
from supplement_tracker.services.regimen import RegimenRepository
from supplement_tracker.services.schedule import ALL_DAYS


@dataclass
class SupabaseRegimenRepository(RegimenRepository):
    """Supabase implementation for regimen queries."""

    client: Client

    def list_regimen_items(self, user_id: str) -> list[RegimenItem]:
        """Return regimen items across all of the user's regimens."""
        response = (
            self.client.table("regimen_items")
            .select(
                "id, product_id, quantity, schedule_days, sort_order, "
                "products(name, brand), regimens!inner(user_id)"
            )
            .eq("regimens.user_id", user_id)
            .order("sort_order", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def list_logged_product_ids(
        self, user_id: str, start: datetime, end: datetime
    ) -> set[str]:
        """Return product ids logged by the user in the time range."""
        response = (
            self.client.table("intake_logs")
            .select("product_id")
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .execute()
        )
        return {
            str(row["product_id"])
            for row in response.data or []
            if row.get("product_id") is not None
        }


def _parse_item(row: dict[str, object]) -> RegimenItem:
    product = row.get("products") or {}
    if not isinstance(product, dict):
        product = {}
    return RegimenItem(
        id=str(row.get("id", "")),
        product_id=str(row.get("product_id", "")),
        product_name=str(product.get("name") or ""),
        product_brand=product.get("brand"),
        quantity=float(row.get("quantity") or 1.0),
        schedule_days=str(row.get("schedule_days") or ALL_DAYS),
    )
