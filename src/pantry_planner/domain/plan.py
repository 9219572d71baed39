"""Domain models for generated meal plans."""

from dataclasses import dataclass, field
from enum import Enum

from pantry_planner.domain.nutrition import MacroTargets, NutritionPer100g
from pantry_planner.domain.pantry import Unit


class MealCategory(str, Enum):
    """Fixed meal slots of a day, in serving order."""

    BREAKFAST = "Colazione"
    MORNING_SNACK = "Spuntino Mattina"
    LUNCH = "Pranzo"
    AFTERNOON_SNACK = "Spuntino Pomeriggio"
    DINNER = "Cena"
    POST_WORKOUT = "Post-Workout"


DAYS_OF_WEEK: tuple[str, ...] = ("Lun", "Mar", "Mer", "Gio", "Ven", "Sab", "Dom")


@dataclass(frozen=True)
class MealItem:
    """A pantry item portion allocated to a meal."""

    pantry_item_id: str
    name: str
    quantity: float
    unit: Unit
    nutrition: NutritionPer100g
    actual_nutrition: MacroTargets


@dataclass
class Meal:
    """One filled meal slot."""

    category: MealCategory
    items: list[MealItem]
    method: str
    total_nutrition: MacroTargets
    consumed: bool = False


@dataclass(frozen=True)
class DayResult:
    """Allocation outcome for a single day."""

    meals: list[Meal]
    total_nutrition: MacroTargets
    calorie_gap: float


@dataclass(frozen=True)
class DayPlan:
    """Single-day plan with user-facing warnings."""

    meals: list[Meal]
    total_nutrition: MacroTargets
    warnings: list[str]


@dataclass(frozen=True)
class WeeklyPlan:
    """Seven-day plan keyed by weekday label."""

    days: dict[str, list[Meal]]
    total_nutrition: dict[str, MacroTargets]
    calorie_gaps: dict[str, float]
    warnings: list[str] = field(default_factory=list)

    def meals_for(self, day: str) -> list[Meal]:
        """Return the meals planned for a weekday label."""
        return self.days.get(day, [])

    def categories_for(self, day: str) -> list[MealCategory]:
        """Return the meal slots that were filled on a weekday."""
        return [meal.category for meal in self.meals_for(day)]
