"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from supplement_tracker.adapters.supabase_intake_repository import (
    SupabaseIntakeRepository,
)
from supplement_tracker.adapters.supabase_regimen_repository import (
    SupabaseRegimenRepository,
)
from supplement_tracker.config import Settings, parse_trend_periods
from supplement_tracker.services.intake import IntakeService
from supplement_tracker.services.nutrients import NutrientService
from supplement_tracker.services.regimen import RegimenService
from supplement_tracker.services.trends import TrendService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrient_service: NutrientService
    intake_service: IntakeService
    trend_service: TrendService
    regimen_service: RegimenService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    intake_repository = SupabaseIntakeRepository(supabase_client)
    regimen_repository = SupabaseRegimenRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        nutrient_service=NutrientService(
            repository=intake_repository,
            debug=resolved_settings.debug,
        ),
        intake_service=IntakeService(intake_repository),
        trend_service=TrendService(
            repository=intake_repository,
            allowed_periods=parse_trend_periods(resolved_settings.trend_periods),
            debug=resolved_settings.debug,
        ),
        regimen_service=RegimenService(regimen_repository),
    )
