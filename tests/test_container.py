"""Tests for container wiring."""

from supplement_tracker.adapters.supabase_intake_repository import (
    SupabaseIntakeRepository,
)
from supplement_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    settings.trend_periods = "14, 7"
    container = build_container(settings)

    assert isinstance(container.nutrient_service.repository, SupabaseIntakeRepository)
    assert container.trend_service.repository is container.nutrient_service.repository
    assert container.trend_service.allowed_periods == (7, 14)
    assert container.regimen_service is not None
    assert container.intake_service.repository is container.nutrient_service.repository
