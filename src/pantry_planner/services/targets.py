"""Daily calorie and macro targets from a user profile."""

from pantry_planner.domain.nutrition import MacroTargets
from pantry_planner.domain.profile import Biometrics, Lifestyle
from pantry_planner.services.nutrition import round_half_up

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
}

GOAL_ADJUSTMENTS = {
    "cut": -500,
    "maintain": 0,
    "bulk": 300,
}

WORKOUT_KCAL = 300
DAYS_PER_WEEK = 7
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def calculate_bmr(biometrics: Biometrics) -> float:
    """Basal metabolic rate with the Mifflin-St Jeor formula."""
    base = 10 * biometrics.weight + 6.25 * biometrics.height - 5 * biometrics.age
    return base + 5 if biometrics.gender == "male" else base - 161


def calculate_tdee(biometrics: Biometrics, lifestyle: Lifestyle) -> float:
    """Total daily energy expenditure, workouts averaged over the week."""
    base = calculate_bmr(biometrics) * ACTIVITY_MULTIPLIERS[lifestyle.activity_level]
    workout_bonus = lifestyle.workout_frequency * WORKOUT_KCAL / DAYS_PER_WEEK
    return base + workout_bonus


def calculate_calorie_target(biometrics: Biometrics, lifestyle: Lifestyle) -> float:
    tdee = calculate_tdee(biometrics, lifestyle)
    return round_half_up(tdee + GOAL_ADJUSTMENTS[lifestyle.goal])


def protein_per_kg(lifestyle: Lifestyle) -> float:
    """Protein grams per kg of body weight for a sport and goal."""
    sport = lifestyle.sport_type
    if sport in {"gym", "crossfit"}:
        return {"bulk": 2.2, "cut": 2.4}.get(lifestyle.goal, 2.0)
    if sport == "martial_arts":
        return 2.0
    if sport == "cardio":
        return 1.4
    if sport == "none":
        return 1.2
    return 1.6


def calculate_macro_targets(
    biometrics: Biometrics, lifestyle: Lifestyle
) -> MacroTargets:
    """Return daily targets: protein by body weight, fat by share, carbs the rest."""
    calories = calculate_calorie_target(biometrics, lifestyle)
    protein = round_half_up(biometrics.weight * protein_per_kg(lifestyle))

    fat_share = 0.25 if lifestyle.goal == "cut" else 0.28
    fat_calories = calories * fat_share
    carb_calories = calories - protein * KCAL_PER_G_PROTEIN - fat_calories

    return MacroTargets(
        calories=calories,
        protein=protein,
        carbs=round_half_up(carb_calories / KCAL_PER_G_CARBS),
        fat=round_half_up(fat_calories / KCAL_PER_G_FAT),
    )
