"""Preparation hints for generated meals."""

from pantry_planner.domain.plan import MealCategory, MealItem

_EGG_KEYWORDS = ("uovo", "uova")
_YOGURT_KEYWORDS = ("yogurt",)
_CARB_KEYWORDS = ("pasta", "riso")
_PROTEIN_KEYWORDS = ("pollo", "carne", "pesce")

_SNACK_CATEGORIES = {
    MealCategory.MORNING_SNACK,
    MealCategory.AFTERNOON_SNACK,
    MealCategory.POST_WORKOUT,
}


def describe(items: list[MealItem], category: MealCategory) -> str:
    """Return a short preparation instruction for a meal."""
    if not items:
        return ""
    names = [item.name.lower() for item in items]

    if category == MealCategory.BREAKFAST:
        return _describe_breakfast(names)
    if category in {MealCategory.LUNCH, MealCategory.DINNER}:
        return _describe_main_course(names)
    if category in _SNACK_CATEGORIES:
        return f"Snack veloce: {' + '.join(names)}."
    return f"Combina: {', '.join(names)}."


def _describe_breakfast(names: list[str]) -> str:
    if _find(names, _EGG_KEYWORDS) is not None:
        return _with_sides(
            "Prepara le uova a piacere.",
            "Accompagna con",
            _without(names, _EGG_KEYWORDS),
        )
    if _find(names, _YOGURT_KEYWORDS) is not None:
        return _with_sides(
            "Versa lo yogurt in una ciotola.",
            "Aggiungi",
            _without(names, _YOGURT_KEYWORDS),
        )
    return f"Prepara la colazione con: {', '.join(names)}."


def _describe_main_course(names: list[str]) -> str:
    # Carb-based dishes take precedence over protein-based ones.
    carb = _find(names, _CARB_KEYWORDS)
    if carb is not None:
        others = [name for name in names if name != carb]
        return _with_sides(f"Cuoci {carb} in acqua salata.", "Condisci con", others)
    protein = _find(names, _PROTEIN_KEYWORDS)
    if protein is not None:
        others = [name for name in names if name != protein]
        return _with_sides(f"Cucina {protein} in padella.", "Servi con", others)
    return f"Prepara il pasto combinando: {', '.join(names)}."


def _find(names: list[str], keywords: tuple[str, ...]) -> str | None:
    for name in names:
        if any(keyword in name for keyword in keywords):
            return name
    return None


def _without(names: list[str], keywords: tuple[str, ...]) -> list[str]:
    return [name for name in names if not any(keyword in name for keyword in keywords)]


def _with_sides(base: str, lead: str, sides: list[str]) -> str:
    if not sides:
        return base
    return f"{base} {lead} {', '.join(sides)}."
