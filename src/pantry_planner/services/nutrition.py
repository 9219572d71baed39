"""Unit conversion and macro scaling for pantry items."""

import logging
import math
from dataclasses import replace

from pantry_planner.domain.nutrition import MacroTargets, NutritionPer100g
from pantry_planner.domain.pantry import PantryItem

DEFAULT_PIECE_WEIGHT_G = 100.0

_logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves going up (2.5 -> 3)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def with_piece_weight(
    item: PantryItem, fallback: float = DEFAULT_PIECE_WEIGHT_G
) -> PantryItem:
    """Return a count-based item with its piece weight filled in.

    Items without a weight get ``fallback`` grams per piece and a warning is
    logged.
    """
    if not item.is_count_based or item.piece_weight:
        return item
    _logger.warning(
        "Missing piece weight for %s (%s), assuming %sg per piece",
        item.name,
        item.id,
        fallback,
    )
    return replace(item, piece_weight=fallback)


def convert_to_grams(
    item: PantryItem, quantity: float, fallback: float = DEFAULT_PIECE_WEIGHT_G
) -> float:
    """Convert a quantity in the item's unit to grams.

    Grams and millilitres are treated as equivalent.
    """
    if item.is_count_based:
        return quantity * with_piece_weight(item, fallback).piece_weight
    return quantity


def scale_nutrition(nutrition: NutritionPer100g, grams: float) -> MacroTargets:
    """Scale per-100g values to a portion and round them."""
    multiplier = grams / 100
    return round_macros(
        MacroTargets(
            calories=nutrition.calories * multiplier,
            protein=nutrition.protein * multiplier,
            carbs=nutrition.carbs * multiplier,
            fat=nutrition.fat * multiplier,
        )
    )


def calculate_actual_nutrition(
    item: PantryItem, quantity: float, fallback: float = DEFAULT_PIECE_WEIGHT_G
) -> MacroTargets:
    """Return the rounded macros of ``quantity`` units of ``item``."""
    grams = convert_to_grams(item, quantity, fallback)
    return scale_nutrition(item.nutrition, grams)


def round_macros(macros: MacroTargets) -> MacroTargets:
    """Round calories to integers and macros to one decimal."""
    return MacroTargets(
        calories=round_half_up(macros.calories),
        protein=round_half_up(macros.protein, 1),
        carbs=round_half_up(macros.carbs, 1),
        fat=round_half_up(macros.fat, 1),
    )


def add_macros(total: MacroTargets, other: MacroTargets) -> MacroTargets:
    return MacroTargets(
        calories=total.calories + other.calories,
        protein=total.protein + other.protein,
        carbs=total.carbs + other.carbs,
        fat=total.fat + other.fat,
    )
