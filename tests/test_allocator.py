"""Tests for the per-day greedy allocator."""

import logging

from pantry_planner.domain.nutrition import MacroTargets
from pantry_planner.domain.plan import MealCategory
from pantry_planner.services.allocator import (
    DayAllocator,
    protein_density,
    slot_targets,
    slot_weights,
)
from pantry_planner.services.virtual_pantry import VirtualPantry
from tests.conftest import DAILY_TARGETS, make_item


def test_slot_weights_include_post_workout_only_on_workout_days() -> None:
    rest = dict(slot_weights(is_workout_day=False))
    workout = dict(slot_weights(is_workout_day=True))

    assert rest[MealCategory.POST_WORKOUT] == 0
    assert workout[MealCategory.POST_WORKOUT] == 0.05
    assert abs(sum(workout.values()) - 1.0) < 1e-9
    assert sum(rest.values()) < 1.0
    assert list(workout) == list(MealCategory)


def test_slot_targets_round_each_macro() -> None:
    target = slot_targets(DAILY_TARGETS, 0.22)

    assert target == MacroTargets(calories=440, protein=33, carbs=44, fat=13)


def test_protein_density_guards_zero_calories() -> None:
    water = make_item("Acqua", ("Pranzo",), quantity=1000, calories=0, protein=0)
    chicken = make_item("Pollo", ("Pranzo",), quantity=500, calories=165, protein=31)

    assert protein_density(water) == 0
    assert protein_density(chicken) == 31 / 165


def test_single_lunch_item_is_capped_by_max_portion() -> None:
    chicken = make_item(
        "Pollo", ("Pranzo",), quantity=500, calories=165, protein=31, fat=3.6
    )
    pantry = VirtualPantry.clone([chicken])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    assert [meal.category for meal in result.meals] == [MealCategory.LUNCH]
    lunch = result.meals[0]
    assert lunch.items[0].quantity == 200
    assert lunch.total_nutrition == MacroTargets(
        calories=330, protein=62, carbs=0, fat=7.2
    )
    assert lunch.consumed is False
    assert result.calorie_gap == 1670
    assert pantry.available("pollo") == 300


def test_eggs_are_capped_at_two_pieces() -> None:
    eggs = make_item(
        "Uovo",
        ("Colazione",),
        quantity=6,
        calories=155,
        protein=13,
        fat=11,
        unit="pz",
        piece_weight=55,
    )
    pantry = VirtualPantry.clone([eggs])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    breakfast = result.meals[0]
    assert breakfast.category == MealCategory.BREAKFAST
    assert breakfast.items[0].quantity == 2
    assert breakfast.items[0].unit == "pz"
    assert breakfast.total_nutrition.calories == 171
    assert result.calorie_gap == 2000 - 171
    assert pantry.available("uovo") == 4


def test_slot_stops_once_early_exit_threshold_is_reached() -> None:
    yogurt = make_item(
        "Yogurt greco", ("Colazione",), quantity=1000, calories=97, protein=9
    )
    oats = make_item("Avena", ("Colazione",), quantity=1000, calories=389, protein=17)
    honey = make_item("Miele", ("Colazione",), quantity=500, calories=304, protein=0.3)
    pantry = VirtualPantry.clone([honey, oats, yogurt])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    breakfast = result.meals[0]
    assert [item.name for item in breakfast.items] == ["Yogurt greco", "Avena"]
    assert [item.quantity for item in breakfast.items] == [200, 60]
    assert breakfast.total_nutrition.calories == 427
    assert breakfast.total_nutrition.protein == 28.2
    assert pantry.available("miele") == 500


def test_lower_early_exit_ratio_takes_fewer_items() -> None:
    yogurt = make_item(
        "Yogurt greco", ("Colazione",), quantity=1000, calories=97, protein=9
    )
    oats = make_item("Avena", ("Colazione",), quantity=1000, calories=389, protein=17)
    pantry = VirtualPantry.clone([yogurt, oats])

    result = DayAllocator(early_exit_ratio=0.4).allocate(
        pantry, DAILY_TARGETS, is_workout_day=False
    )

    assert [item.name for item in result.meals[0].items] == ["Yogurt greco"]


def test_ranking_is_stable_for_equal_density() -> None:
    rice = make_item("Riso", ("Pranzo",), quantity=1000, calories=350, protein=7)
    turkey = make_item(
        "Tacchino", ("Pranzo",), quantity=100, calories=100, protein=20
    )
    beef = make_item("Manzo", ("Pranzo",), quantity=1000, calories=200, protein=40)
    pantry = VirtualPantry.clone([rice, turkey, beef])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    lunch = result.meals[0]
    assert [item.name for item in lunch.items] == ["Tacchino", "Manzo", "Riso"]
    assert [item.quantity for item in lunch.items] == [100, 180, 40]
    assert lunch.total_nutrition.calories == 600


def test_earlier_slots_deplete_later_ones() -> None:
    chicken = make_item(
        "Pollo", ("Pranzo", "Cena"), quantity=300, calories=165, protein=31
    )
    pantry = VirtualPantry.clone([chicken])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    lunch, dinner = result.meals
    assert lunch.category == MealCategory.LUNCH
    assert lunch.items[0].quantity == 200
    assert dinner.category == MealCategory.DINNER
    assert dinner.items[0].quantity == 100
    assert pantry.available("pollo") == 0


def test_post_workout_slot_only_on_workout_days() -> None:
    shake = make_item(
        "Proteine whey", ("Post-Workout",), quantity=900, calories=380, protein=80
    )

    rest = DayAllocator().allocate(
        VirtualPantry.clone([shake]), DAILY_TARGETS, is_workout_day=False
    )
    workout = DayAllocator().allocate(
        VirtualPantry.clone([shake]), DAILY_TARGETS, is_workout_day=True
    )

    assert rest.meals == []
    assert [meal.category for meal in workout.meals] == [MealCategory.POST_WORKOUT]


def test_zero_calorie_items_are_sized_but_add_nothing() -> None:
    water = make_item("Acqua frizzante", ("Pranzo",), quantity=1000, calories=0)
    pantry = VirtualPantry.clone([water])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    lunch = result.meals[0]
    assert lunch.items[0].quantity == 300
    assert lunch.total_nutrition.calories == 0
    assert result.calorie_gap == 2000


def test_missing_piece_weight_is_logged_once_per_allocation(caplog) -> None:
    almonds = make_item(
        "Mandorla", ("Spuntino Mattina",), quantity=50, calories=600, unit="pz"
    )
    pantry = VirtualPantry.clone([almonds])

    with caplog.at_level(logging.WARNING, logger="pantry_planner"):
        result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    snack = result.meals[0]
    assert snack.items[0].quantity == 1
    assert snack.total_nutrition.calories == 600
    warnings = [r for r in caplog.records if "Missing piece weight" in r.message]
    assert len(warnings) == 1


def test_leftover_scraps_are_never_overdrawn() -> None:
    chicken = make_item("Pollo", ("Pranzo",), quantity=3, calories=165, protein=31)
    pantry = VirtualPantry.clone([chicken])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    assert result.meals[0].items[0].quantity == 3
    assert pantry.available("pollo") == 0


def test_fractional_piece_leftover_is_skipped() -> None:
    apple = make_item(
        "Mela",
        ("Spuntino Pomeriggio",),
        quantity=0.5,
        calories=52,
        unit="pz",
        piece_weight=150,
    )
    pantry = VirtualPantry.clone([apple])

    result = DayAllocator().allocate(pantry, DAILY_TARGETS, is_workout_day=False)

    assert result.meals == []
    assert pantry.available("mela") == 0.5


def test_zero_calorie_targets_emit_no_meals() -> None:
    chicken = make_item("Pollo", ("Pranzo",), quantity=500, calories=165)
    pantry = VirtualPantry.clone([chicken])

    result = DayAllocator().allocate(
        pantry, MacroTargets(calories=0, protein=0, carbs=0, fat=0), False
    )

    assert result.meals == []
    assert result.calorie_gap == 0
