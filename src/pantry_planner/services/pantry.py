"""Helpers for entering new pantry items."""

from dataclasses import dataclass

from pantry_planner.domain.nutrition import NutritionPer100g
from pantry_planner.domain.pantry import COUNT_UNIT
from pantry_planner.services.nutri_score import calculate_nutri_score
from pantry_planner.services.portions import (
    default_piece_weight,
    suggested_piece_weights,
)


@dataclass(frozen=True)
class PantryPrefill:
    """Suggested values for a pantry item form."""

    piece_weight: float | None
    suggestions: list[tuple[str, float]]
    nutri_score: str | None


@dataclass
class PantryPrefillService:
    """Computes defaults shown while a pantry item is being created."""

    max_suggestions: int = 5

    def prefill(
        self, name: str, unit: str, nutrition: NutritionPer100g | None = None
    ) -> PantryPrefill:
        """Return piece weight hints and the Nutri-Score for a new item."""
        piece_weight = None
        suggestions: list[tuple[str, float]] = []
        if unit == COUNT_UNIT:
            piece_weight = default_piece_weight(name)
            suggestions = suggested_piece_weights(name, self.max_suggestions)
        return PantryPrefill(
            piece_weight=piece_weight,
            suggestions=suggestions,
            nutri_score=calculate_nutri_score(nutrition) if nutrition else None,
        )
