"""Realistic portion sizes and default piece weights.

Keyword tables are ordered: the first keyword contained in a food name wins,
so more specific entries must precede broader ones.
"""

from pantry_planner.domain.pantry import COUNT_UNIT
from pantry_planner.services.nutrition import round_half_up

# Grams (or millilitres) per meal, pieces for foods usually counted.
MAX_PORTION_SIZES: tuple[tuple[str, float], ...] = (
    # Dairy
    ("yogurt", 200),
    ("latte", 250),
    ("formaggio", 50),
    ("mozzarella", 125),
    ("ricotta", 100),
    # Proteins
    ("pollo", 200),
    ("tacchino", 200),
    ("manzo", 180),
    ("maiale", 180),
    ("vitello", 180),
    ("pesce", 200),
    ("salmone", 180),
    ("tonno", 150),
    ("uova", 3),
    ("uovo", 2),
    # Carbs, dry weight
    ("pasta", 120),
    ("riso", 100),
    ("pane", 80),
    ("farro", 100),
    ("orzo", 100),
    ("quinoa", 80),
    ("avena", 60),
    ("cereali", 50),
    # Vegetables and starches
    ("patate", 250),
    ("patata", 250),
    ("verdura", 300),
    ("insalata", 150),
    ("pomodori", 200),
    ("zucchine", 250),
    ("broccoli", 200),
    ("spinaci", 150),
    # Fruit
    ("frutta", 200),
    ("mela", 1),
    ("banana", 1),
    ("arancia", 1),
    ("pera", 1),
    ("kiwi", 2),
    # Nuts and seeds
    ("noci", 30),
    ("mandorle", 30),
    ("nocciole", 30),
    ("arachidi", 40),
    # Fats
    ("olio", 15),
    ("burro", 15),
)

DEFAULT_MAX_GRAMS = 300
DEFAULT_MAX_PIECES = 3

DEFAULT_PIECE_WEIGHTS: tuple[tuple[str, float], ...] = (
    # Eggs
    ("uovo", 55),
    ("uova", 55),
    ("albume", 33),
    ("tuorlo", 17),
    # Fruit
    ("mela", 150),
    ("banana", 120),
    ("arancia", 180),
    ("pera", 160),
    ("pesca", 150),
    ("kiwi", 80),
    ("mandarino", 70),
    ("limone", 60),
    ("fragola", 15),
    ("ciliegia", 8),
    ("albicocca", 40),
    ("prugna", 50),
    ("fico", 40),
    ("melograno", 250),
    ("avocado", 200),
    # Vegetables
    ("pomodoro", 120),
    ("cetriolo", 200),
    ("carota", 80),
    ("zucchina", 200),
    ("peperone", 150),
    ("melanzana", 300),
    ("patata", 150),
    ("cipolla", 100),
    ("aglio", 5),
    ("fungo", 20),
    # Bread and bakery
    ("fetta pane", 30),
    ("fetta di pane", 30),
    ("pane", 50),
    ("panino", 80),
    ("grissino", 10),
    ("cracker", 8),
    ("fetta biscottata", 10),
    ("fetta wasa", 12),
    ("wasa", 12),
    ("galletta", 10),
    ("galletta di riso", 10),
    # Proteins
    ("fetta prosciutto", 20),
    ("fetta di prosciutto", 20),
    ("fetta bresaola", 15),
    ("fetta di bresaola", 15),
    ("fetta salame", 10),
    ("würstel", 50),
    ("hamburger", 100),
    ("polpetta", 30),
    # Dairy
    ("sottiletta", 20),
    ("formaggino", 25),
    ("mozzarella", 125),
    ("yogurt", 125),
    # Snacks and sweets
    ("biscotto", 10),
    ("barretta", 30),
    ("barretta proteica", 60),
    ("cioccolatino", 10),
    ("quadretto cioccolato", 5),
    # Other
    ("cucchiaio olio", 10),
    ("cucchiaio", 15),
    ("cucchiaino", 5),
    ("noce", 5),
    ("mandorla", 1.2),
    ("arachide", 1),
)

_PIECE_WEIGHT_LOOKUP = dict(DEFAULT_PIECE_WEIGHTS)

MAX_SUGGESTIONS = 5


def max_portion(name: str, unit: str) -> float:
    """Return the largest realistic single-meal quantity for a food."""
    name_lower = name.lower()
    for keyword, limit in MAX_PORTION_SIZES:
        if keyword in name_lower:
            return limit
    return DEFAULT_MAX_PIECES if unit == COUNT_UNIT else DEFAULT_MAX_GRAMS


def round_quantity(quantity: float, unit: str) -> float:
    """Round pieces to whole numbers and grams to multiples of 5.

    Positive inputs never round down to zero.
    """
    if unit == COUNT_UNIT:
        return max(1, int(round_half_up(quantity)))
    return max(5, int(round_half_up(quantity / 5)) * 5)


def default_piece_weight(name: str) -> float | None:
    """Return a typical weight in grams for one piece of a food, if known."""
    normalized = name.lower().strip()
    if not normalized:
        return None
    if normalized in _PIECE_WEIGHT_LOOKUP:
        return _PIECE_WEIGHT_LOOKUP[normalized]
    for keyword, weight in DEFAULT_PIECE_WEIGHTS:
        if keyword in normalized or normalized in keyword:
            return weight
    return None


def suggested_piece_weights(
    name: str, limit: int = MAX_SUGGESTIONS
) -> list[tuple[str, float]]:
    """Return known piece weights whose name overlaps with ``name``."""
    normalized = name.lower().strip()
    if not normalized:
        return []
    suggestions = [
        (keyword, weight)
        for keyword, weight in DEFAULT_PIECE_WEIGHTS
        if keyword in normalized or normalized in keyword
    ]
    return suggestions[:limit]
