"""Domain models for pantry items."""

from dataclasses import dataclass
from typing import Literal

from pantry_planner.domain.nutrition import NutritionPer100g

Unit = Literal["g", "ml", "pz"]

COUNT_UNIT: Unit = "pz"


@dataclass(frozen=True)
class PantryItem:
    """A food item owned by the user.

    ``quantity`` is expressed in ``unit``. Count-based items (``pz``) need a
    ``piece_weight`` in grams to be converted to nutrition values.
    """

    id: str
    name: str
    categories: tuple[str, ...]
    unit: Unit
    quantity: float
    nutrition: NutritionPer100g
    piece_weight: float | None = None
    nutri_score: str | None = None

    @property
    def is_count_based(self) -> bool:
        """Return True when quantity counts pieces."""
        return self.unit == COUNT_UNIT
