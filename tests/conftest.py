"""Shared test fixtures."""

import logging

import pytest

from pantry_planner.config import Settings
from pantry_planner.containers import AppContainer, build_container
from pantry_planner.domain.nutrition import MacroTargets, NutritionPer100g
from pantry_planner.domain.pantry import PantryItem

DAILY_TARGETS = MacroTargets(calories=2000, protein=150, carbs=200, fat=60)


def make_item(  # noqa: PLR0913
    name: str,
    categories: tuple[str, ...],
    *,
    quantity: float,
    calories: float,
    protein: float = 0,
    carbs: float = 0,
    fat: float = 0,
    unit: str = "g",
    piece_weight: float | None = None,
    item_id: str | None = None,
) -> PantryItem:
    """Build a pantry item with sensible defaults."""
    return PantryItem(
        id=item_id or name.lower().replace(" ", "-"),
        name=name,
        categories=categories,
        unit=unit,
        quantity=quantity,
        nutrition=NutritionPer100g(
            calories=calories, protein=protein, carbs=carbs, fat=fat
        ),
        piece_weight=piece_weight,
    )


def pantry_payload(item: PantryItem) -> dict[str, object]:
    """Serialize a pantry item the way API clients send it."""
    payload: dict[str, object] = {
        "id": item.id,
        "name": item.name,
        "categories": list(item.categories),
        "unit": item.unit,
        "quantity": item.quantity,
        "nutritionPer100g": {
            "calories": item.nutrition.calories,
            "protein": item.nutrition.protein,
            "carbs": item.nutrition.carbs,
            "fat": item.nutrition.fat,
        },
    }
    if item.piece_weight is not None:
        payload["pieceWeight"] = item.piece_weight
    return payload


@pytest.fixture(autouse=True)
def _reset_app_logger():
    yield
    logger = logging.getLogger("pantry_planner")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
