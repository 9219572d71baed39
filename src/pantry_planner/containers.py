"""Dependency container wiring for the application."""

from dataclasses import dataclass

from pantry_planner.config import Settings
from pantry_planner.services.allocator import DayAllocator
from pantry_planner.services.pantry import PantryPrefillService
from pantry_planner.services.planner import WeekPlanner


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    planner: WeekPlanner
    pantry_prefill_service: PantryPrefillService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    allocator = DayAllocator(
        early_exit_ratio=resolved_settings.early_exit_ratio,
        fallback_piece_weight_g=resolved_settings.fallback_piece_weight_g,
    )
    planner = WeekPlanner(
        allocator=allocator,
        weekly_gap_warning_kcal=resolved_settings.weekly_gap_warning_kcal,
        daily_gap_warning_kcal=resolved_settings.daily_gap_warning_kcal,
        single_day_gap_warning_kcal=resolved_settings.single_day_gap_warning_kcal,
    )
    return AppContainer(
        settings=resolved_settings,
        planner=planner,
        pantry_prefill_service=PantryPrefillService(),
    )
