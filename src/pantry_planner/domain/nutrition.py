"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroTargets:
    """Calories and macronutrients, used as a target or as an accumulated total."""

    calories: float
    protein: float
    carbs: float
    fat: float


ZERO_MACROS = MacroTargets(calories=0, protein=0, carbs=0, fat=0)


@dataclass(frozen=True)
class NutritionPer100g:
    """Label values per 100 g (or 100 ml) of a food."""

    calories: float
    protein: float
    carbs: float
    fat: float
    sugar: float = 0.0
    salt: float = 0.0
