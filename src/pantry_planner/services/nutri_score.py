"""Simplified Nutri-Score grading from per-100g label values.

Only energy, sugar, saturated fat and salt count as negative points and only
protein as positive points. Saturated fat is estimated as 40% of total fat.
"""

from pantry_planner.domain.nutrition import NutritionPer100g

# Lower bounds (exclusive) awarding 1, 2, ... points.
ENERGY_STEPS = (80, 160, 240, 320, 400, 480, 560, 640, 720, 800)
SUGAR_STEPS = (4.5, 9, 13.5, 18, 22.5, 27, 31, 36, 40, 45)
SATURATED_FAT_STEPS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
SALT_STEPS = (0.24, 0.48, 0.72, 0.96, 1.2, 1.44, 1.68, 1.92, 2.16, 2.4)
PROTEIN_STEPS = (1.6, 3.2, 4.8, 6.4, 8)

SATURATED_FAT_SHARE = 0.4

# Highest final score for each grade, best first.
GRADE_BOUNDS = (("A", -1), ("B", 2), ("C", 10), ("D", 18))
WORST_GRADE = "E"


def calculate_nutri_score(nutrition: NutritionPer100g) -> str:
    """Return the Nutri-Score letter (A-E) for a food."""
    negative = (
        _points(nutrition.calories, ENERGY_STEPS)
        + _points(nutrition.sugar, SUGAR_STEPS)
        + _points(nutrition.fat * SATURATED_FAT_SHARE, SATURATED_FAT_STEPS)
        + _points(nutrition.salt, SALT_STEPS)
    )
    positive = _points(nutrition.protein, PROTEIN_STEPS)
    score = negative - positive
    for grade, bound in GRADE_BOUNDS:
        if score <= bound:
            return grade
    return WORST_GRADE


def _points(value: float, steps: tuple[float, ...]) -> int:
    return sum(1 for step in steps if value > step)
