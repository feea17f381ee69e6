"""Pydantic request and response models for the HTTP API.

Fields use camelCase aliases; handlers drop ``None`` values so clients can
test for absent fields such as ``rdiPercent``.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from supplement_tracker.domain.insights import InsightCategory, InsightType


class ApiModel(BaseModel):
    """Base model with camelCase aliases that reads from dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class NutrientSourceResponse(ApiModel):
    """Product contribution to a nutrient total."""

    product_name: str
    amount: float


class AggregatedNutrientResponse(ApiModel):
    """Nutrient total with RDI coverage."""

    name: str
    total_amount: float
    unit: str
    rdi_amount: float | None = None
    rdi_percent: float | None = None
    sources: list[NutrientSourceResponse]


class NutrientsResponse(ApiModel):
    """Aggregated nutrients for a day or date range."""

    date: str
    user_id: str | None = None
    nutrients: list[AggregatedNutrientResponse]
    intake_count: int


class InsightResponse(ApiModel):
    """Single insight about the user's intake."""

    type: InsightType
    category: InsightCategory
    nutrient: str | None = None
    message: str
    details: str | None = None


class InsightsResponse(ApiModel):
    """Insights payload."""

    insights: list[InsightResponse]


class DailyNutrientResponse(ApiModel):
    """Nutrient amount for one trend day."""

    name: str
    amount: float
    unit: str
    rdi_percent: float | None = None


class TrendPointResponse(ApiModel):
    """Nutrient amounts for one day."""

    day: date = Field(serialization_alias="date")
    nutrients: list[DailyNutrientResponse]


class NutrientTrendSummaryResponse(ApiModel):
    """Statistics for one nutrient over a trend period."""

    name: str
    unit: str
    average: float
    min: float
    max: float
    days_with_intake: int
    average_rdi_percent: float | None = None


class TrendsResponse(ApiModel):
    """Trend report payload."""

    period: int
    start_date: date
    end_date: date
    data: list[TrendPointResponse]
    summary: list[NutrientTrendSummaryResponse]


class PendingItemResponse(ApiModel):
    """Regimen item not yet logged for the day."""

    id: str
    product_id: str
    product_name: str
    product_brand: str | None = None
    quantity: float


class PendingCheckResponse(ApiModel):
    """Pending regimen items payload."""

    pending_count: int
    completed_count: int
    total_count: int
    pending_items: list[PendingItemResponse]


class IntakeCreateRequest(ApiModel):
    """Request body for logging an intake."""

    user_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    quantity: float = Field(default=1.0, gt=0)
    day: date | None = Field(default=None, alias="date")


class IntakeResponse(ApiModel):
    """Logged intake payload."""

    id: str
    user_id: str
    product_id: str
    quantity: float
    logged_at: datetime = Field(serialization_alias="date")


class RegimenLogItemRequest(ApiModel):
    """Checklist state for one regimen product."""

    product_id: str = Field(min_length=1)
    checked: bool
    quantity: float = Field(gt=0)


class RegimenLogRequest(ApiModel):
    """Request body for syncing a regimen day checklist."""

    user_id: str = Field(min_length=1)
    day: date = Field(alias="date")
    items: list[RegimenLogItemRequest] = Field(min_length=1)


class RegimenLogResultResponse(ApiModel):
    """Outcome for one checklist item."""

    product_id: str
    logged: bool
    intake_id: str | None = None


class RegimenLogResponse(ApiModel):
    """Regimen checklist sync payload."""

    success: bool
    results: list[RegimenLogResultResponse]
