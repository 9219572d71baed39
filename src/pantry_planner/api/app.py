"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request

from pantry_planner.api.models import (
    DayPlanRequest,
    PrefillRequest,
    ProfilePayload,
    WeeklyPlanRequest,
)
from pantry_planner.app_logging import configure_logging
from pantry_planner.containers import AppContainer
from pantry_planner.services.targets import calculate_macro_targets


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/targets")
    async def targets(profile: ProfilePayload) -> dict[str, float]:
        """Compute daily macro targets for a profile."""
        return asdict(
            calculate_macro_targets(profile.biometrics(), profile.lifestyle())
        )

    @app.post("/plans/week")
    def weekly_plan(body: WeeklyPlanRequest, request: Request) -> dict[str, object]:
        """Generate a seven-day plan from the submitted pantry."""
        state_container: AppContainer = request.app.state.container
        plan = state_container.planner.plan_week(
            body.pantry_items(),
            body.targets.to_domain(),
            body.workout_frequency,
        )
        if plan.warnings:
            logger.info("Weekly plan has %s shortfall warnings", len(plan.warnings))
        return asdict(plan)

    @app.post("/plans/day")
    def day_plan(body: DayPlanRequest, request: Request) -> dict[str, object]:
        """Generate a single-day plan from the submitted pantry."""
        state_container: AppContainer = request.app.state.container
        plan = state_container.planner.plan_day(
            body.pantry_items(),
            body.targets.to_domain(),
            body.is_workout_day,
        )
        return asdict(plan)

    @app.post("/pantry/prefill")
    async def pantry_prefill(
        body: PrefillRequest, request: Request
    ) -> dict[str, object]:
        """Suggest piece weight and Nutri-Score for a new pantry item."""
        state_container: AppContainer = request.app.state.container
        nutrition = (
            body.nutrition_per_100g.to_domain() if body.nutrition_per_100g else None
        )
        prefill = state_container.pantry_prefill_service.prefill(
            body.name, body.unit, nutrition
        )
        return {
            "piece_weight": prefill.piece_weight,
            "suggestions": [
                {"name": name, "weight": weight}
                for name, weight in prefill.suggestions
            ],
            "nutri_score": prefill.nutri_score,
        }

    return app
