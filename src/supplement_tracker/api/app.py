"""FastAPI application factory."""

import logging
from datetime import UTC, date, datetime, time, timedelta

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from supplement_tracker.api.schemas import (
    AggregatedNutrientResponse,
    ApiModel,
    InsightResponse,
    InsightsResponse,
    IntakeCreateRequest,
    IntakeResponse,
    NutrientsResponse,
    PendingCheckResponse,
    PendingItemResponse,
    RegimenLogRequest,
    RegimenLogResponse,
    RegimenLogResultResponse,
    TrendsResponse,
)
from supplement_tracker.app_logging import configure_logging
from supplement_tracker.containers import AppContainer
from supplement_tracker.domain.intake import RegimenLogItem
from supplement_tracker.services.intake import NotFoundError
from supplement_tracker.services.trends import InvalidPeriodError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def validation_failed(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Answer malformed query parameters and bodies with 400."""
        details = [_format_validation_issue(issue) for issue in exc.errors()]
        return _api_error("Validation failed", 400, details)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/nutrients", response_model=None)
    async def nutrients(
        request: Request,
        user_id: str | None = Query(default=None, alias="userId"),
        day: date | None = Query(default=None, alias="date"),
        start_date: date | None = Query(default=None, alias="startDate"),
        end_date: date | None = Query(default=None, alias="endDate"),
    ) -> dict[str, object] | JSONResponse:
        """Aggregate nutrients for a day or an inclusive date range."""
        window = _resolve_window(day, start_date, end_date)
        if window is None:
            return _api_error("Either date or startDate/endDate is required", 400)
        state_container: AppContainer = request.app.state.container
        try:
            summary = state_container.nutrient_service.summarize(user_id, *window)
        except Exception:
            logger.exception(
                "Failed to aggregate nutrients", extra={"user_id": user_id}
            )
            return _api_error("Failed to aggregate nutrients", 500)
        label = day.isoformat() if day else f"{start_date} to {end_date}"
        response = NutrientsResponse(
            date=label,
            user_id=user_id,
            nutrients=[
                AggregatedNutrientResponse.model_validate(nutrient)
                for nutrient in summary.nutrients
            ],
            intake_count=summary.intake_count,
        )
        return _dump(response)

    @app.get("/insights", response_model=None)
    async def insights(
        request: Request,
        user_id: str | None = Query(default=None, alias="userId"),
        day: date | None = Query(default=None, alias="date"),
        start_date: date | None = Query(default=None, alias="startDate"),
        end_date: date | None = Query(default=None, alias="endDate"),
    ) -> dict[str, object] | JSONResponse:
        """Return insights for a day or an inclusive date range."""
        window = _resolve_window(day, start_date, end_date)
        if window is None:
            return _api_error("Either date or startDate/endDate is required", 400)
        state_container: AppContainer = request.app.state.container
        try:
            found = state_container.nutrient_service.insights(user_id, *window)
        except Exception:
            logger.exception(
                "Failed to generate insights", extra={"user_id": user_id}
            )
            return _api_error("Failed to generate insights", 500)
        response = InsightsResponse(
            insights=[InsightResponse.model_validate(insight) for insight in found]
        )
        return _dump(response)

    @app.get("/trends", response_model=None)
    async def trends(
        request: Request,
        user_id: str | None = Query(default=None, alias="userId"),
        period: int = 7,
    ) -> dict[str, object] | JSONResponse:
        """Return per-day nutrient trends for the last ``period`` days."""
        if not user_id:
            return _api_error("userId is required", 400)
        state_container: AppContainer = request.app.state.container
        try:
            report = state_container.trend_service.get_trends(user_id, period)
        except InvalidPeriodError as exc:
            return _api_error(str(exc), 400)
        except Exception:
            logger.exception(
                "Failed to fetch trends", extra={"user_id": user_id}
            )
            return _api_error("Failed to fetch trends data", 500)
        return _dump(TrendsResponse.model_validate(report))

    @app.get("/notifications/check", response_model=None)
    async def check_pending(
        request: Request,
        user_id: str | None = Query(default=None, alias="userId"),
        day: date | None = Query(default=None, alias="date"),
    ) -> dict[str, object] | JSONResponse:
        """Return regimen items scheduled for the day that are not yet logged."""
        if not user_id:
            return _api_error("userId is required", 400)
        state_container: AppContainer = request.app.state.container
        try:
            status = state_container.regimen_service.check_pending(user_id, day)
        except Exception:
            logger.exception(
                "Failed to check pending items", extra={"user_id": user_id}
            )
            return _api_error("Failed to check pending items", 500)
        response = PendingCheckResponse(
            pending_count=len(status.pending),
            completed_count=len(status.completed),
            total_count=status.total_count,
            pending_items=[
                PendingItemResponse.model_validate(item) for item in status.pending
            ],
        )
        return _dump(response)

    @app.post("/intake", status_code=201, response_model=None)
    async def log_intake(
        payload: IntakeCreateRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Log a product intake for a user."""
        state_container: AppContainer = request.app.state.container
        try:
            entry = state_container.intake_service.log_intake(
                payload.user_id, payload.product_id, payload.quantity, payload.day
            )
        except NotFoundError as exc:
            return _api_error(str(exc), 404)
        except Exception:
            logger.exception(
                "Failed to log intake", extra={"user_id": payload.user_id}
            )
            return _api_error("Failed to log intake", 500)
        return _dump(IntakeResponse.model_validate(entry))

    @app.delete("/intake", response_model=None)
    async def delete_intake(
        request: Request,
        intake_id: str | None = Query(default=None, alias="id"),
    ) -> dict[str, object] | JSONResponse:
        """Delete an intake log by id."""
        if not intake_id:
            return _api_error("Intake ID is required", 400)
        state_container: AppContainer = request.app.state.container
        try:
            state_container.intake_service.delete_intake(intake_id)
        except NotFoundError as exc:
            return _api_error(str(exc), 404)
        except Exception:
            logger.exception(
                "Failed to delete intake", extra={"intake_id": intake_id}
            )
            return _api_error("Failed to delete intake", 500)
        return {"success": True}

    @app.post("/regimen/log", response_model=None)
    async def log_regimen_day(
        payload: RegimenLogRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Create or remove the day's intakes to match a regimen checklist."""
        state_container: AppContainer = request.app.state.container
        items = [
            RegimenLogItem(
                product_id=item.product_id,
                checked=item.checked,
                quantity=item.quantity,
            )
            for item in payload.items
        ]
        try:
            results = state_container.intake_service.log_regimen_day(
                payload.user_id, payload.day, items
            )
        except Exception:
            logger.exception(
                "Failed to toggle regimen log", extra={"user_id": payload.user_id}
            )
            return _api_error("Failed to toggle regimen log", 500)
        response = RegimenLogResponse(
            success=True,
            results=[
                RegimenLogResultResponse.model_validate(result) for result in results
            ],
        )
        return _dump(response)

    return app


def _resolve_window(
    day: date | None, start_date: date | None, end_date: date | None
) -> tuple[datetime, datetime] | None:
    """Return a half-open UTC window covering whole days."""
    if day is not None:
        first, last = day, day
    elif start_date is not None and end_date is not None:
        first, last = start_date, end_date
    else:
        return None
    start = datetime.combine(first, time.min, tzinfo=UTC)
    end = datetime.combine(last + timedelta(days=1), time.min, tzinfo=UTC)
    return start, end


def _dump(model: ApiModel) -> dict[str, object]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _format_validation_issue(issue: dict[str, object]) -> str:
    """Render a pydantic error as ``"<field path>: <message>"``."""
    loc = tuple(issue.get("loc") or ())
    # drop the "query"/"body" prefix
    path = loc[1:] or loc
    return f"{'.'.join(str(part) for part in path)}: {issue.get('msg', '')}"


def _api_error(
    message: str, status_code: int, details: list[str] | None = None
) -> JSONResponse:
    logging.getLogger(__name__).error("API error: %s", message)
    body: dict[str, object] = {"error": message}
    if details:
        body["details"] = details
    return JSONResponse(body, status_code=status_code)
