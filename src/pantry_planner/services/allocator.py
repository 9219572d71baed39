"""Greedy allocation of pantry items into the meals of one day."""

import logging
import math
from dataclasses import dataclass

from pantry_planner.domain.nutrition import ZERO_MACROS, MacroTargets
from pantry_planner.domain.pantry import PantryItem
from pantry_planner.domain.plan import DayResult, Meal, MealCategory, MealItem
from pantry_planner.services.nutrition import (
    DEFAULT_PIECE_WEIGHT_G,
    add_macros,
    calculate_actual_nutrition,
    round_half_up,
    round_macros,
    with_piece_weight,
)
from pantry_planner.services.portions import max_portion, round_quantity
from pantry_planner.services.recipes import describe
from pantry_planner.services.virtual_pantry import VirtualPantry

# Share of the daily calories assigned to each slot, in serving order.
SLOT_WEIGHTS: tuple[tuple[MealCategory, float], ...] = (
    (MealCategory.BREAKFAST, 0.22),
    (MealCategory.MORNING_SNACK, 0.08),
    (MealCategory.LUNCH, 0.30),
    (MealCategory.AFTERNOON_SNACK, 0.08),
    (MealCategory.DINNER, 0.27),
    (MealCategory.POST_WORKOUT, 0.05),
)

DEFAULT_EARLY_EXIT_RATIO = 0.85
# Portion sizing for items labelled with 0 kcal.
ZERO_CALORIE_SIZING_KCAL = 100.0
MIN_GRAMS = 5

_logger = logging.getLogger(__name__)


def slot_weights(is_workout_day: bool) -> list[tuple[MealCategory, float]]:
    """Return slot weights for a day; post-workout only counts on workout days."""
    return [
        (category, weight if is_workout_day else 0.0)
        if category == MealCategory.POST_WORKOUT
        else (category, weight)
        for category, weight in SLOT_WEIGHTS
    ]


def slot_targets(daily_targets: MacroTargets, weight: float) -> MacroTargets:
    """Return the share of daily targets for one slot, rounded to integers."""
    return MacroTargets(
        calories=round_half_up(daily_targets.calories * weight),
        protein=round_half_up(daily_targets.protein * weight),
        carbs=round_half_up(daily_targets.carbs * weight),
        fat=round_half_up(daily_targets.fat * weight),
    )


def protein_density(item: PantryItem) -> float:
    """Protein grams per kcal; zero-calorie items count as 1 kcal."""
    return item.nutrition.protein / max(1, item.nutrition.calories)


@dataclass
class DayAllocator:
    """Fills the meal slots of one day from a virtual pantry.

    Items are ranked by protein density and taken greedily until the slot
    reaches ``early_exit_ratio`` of its calorie target. Every portion is
    deducted from the pantry immediately, so earlier slots and days limit
    what later ones can use.
    """

    early_exit_ratio: float = DEFAULT_EARLY_EXIT_RATIO
    fallback_piece_weight_g: float = DEFAULT_PIECE_WEIGHT_G

    def allocate(
        self,
        pantry: VirtualPantry,
        daily_targets: MacroTargets,
        is_workout_day: bool,
    ) -> DayResult:
        """Allocate one day of meals, depleting ``pantry`` in place."""
        meals: list[Meal] = []
        total = ZERO_MACROS
        for category, weight in slot_weights(is_workout_day):
            if weight == 0:
                continue
            meal = self._fill_slot(
                pantry, category, slot_targets(daily_targets, weight)
            )
            if meal is None:
                continue
            meals.append(meal)
            total = add_macros(total, meal.total_nutrition)

        total = round_macros(total)
        return DayResult(
            meals=meals,
            total_nutrition=total,
            calorie_gap=max(0, daily_targets.calories - total.calories),
        )

    def _fill_slot(
        self, pantry: VirtualPantry, category: MealCategory, target: MacroTargets
    ) -> Meal | None:
        candidates = sorted(
            pantry.eligible(category.value), key=protein_density, reverse=True
        )
        if not candidates:
            return None

        threshold = target.calories * self.early_exit_ratio
        items: list[MealItem] = []
        accumulated = ZERO_MACROS
        for candidate in candidates:
            if accumulated.calories >= threshold:
                break
            available = pantry.available(candidate.id)
            if available <= 0:
                continue
            item = with_piece_weight(candidate, self.fallback_piece_weight_g)
            quantity = self._portion(
                item, target.calories - accumulated.calories, available
            )
            if quantity <= 0:
                continue

            actual = calculate_actual_nutrition(item, quantity)
            items.append(
                MealItem(
                    pantry_item_id=item.id,
                    name=item.name,
                    quantity=quantity,
                    unit=item.unit,
                    nutrition=item.nutrition,
                    actual_nutrition=actual,
                )
            )
            accumulated = add_macros(accumulated, actual)
            pantry.take(item.id, quantity)

        if not items:
            return None
        meal = Meal(
            category=category,
            items=items,
            method=describe(items, category),
            total_nutrition=round_macros(accumulated),
        )
        _logger.debug(
            "Filled %s: items=%s calories=%s target=%s",
            category.value,
            len(items),
            meal.total_nutrition.calories,
            target.calories,
        )
        return meal

    @staticmethod
    def _portion(item: PantryItem, calories_needed: float, available: float) -> float:
        """Return how much of ``item`` to take, never more than ``available``."""
        limit = max_portion(item.name, item.unit)
        calories_per_100 = item.nutrition.calories or ZERO_CALORIE_SIZING_KCAL

        if item.is_count_based:
            whole_pieces = math.floor(available)
            if whole_pieces < 1:
                return 0
            calories_per_piece = calories_per_100 * item.piece_weight / 100
            pieces = math.ceil(calories_needed / calories_per_piece)
            return max(1, min(pieces, limit, whole_pieces))

        grams = min(calories_needed / calories_per_100 * 100, limit, available)
        grams = max(MIN_GRAMS, round_quantity(grams, item.unit))
        # Rounding up to the 5 g grid must not overdraw the last scraps.
        return min(grams, available)
