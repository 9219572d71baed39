"""Working copy of the pantry that is depleted while planning."""

from dataclasses import dataclass, field

from pantry_planner.domain.pantry import PantryItem


@dataclass
class VirtualPantry:
    """Pantry snapshot with live quantities.

    The source items are never modified: quantities live in a separate list
    indexed like ``items``. A snapshot is owned by a single planning run and
    handed from one day to the next.
    """

    items: list[PantryItem]
    _quantities: list[float] = field(init=False, default_factory=list)
    _index: dict[str, int] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self._quantities = [item.quantity for item in self.items]
        self._index = {}
        for position, item in enumerate(self.items):
            self._index.setdefault(item.id, position)

    @classmethod
    def clone(cls, items: list[PantryItem]) -> "VirtualPantry":
        """Create a fresh snapshot of the current pantry."""
        return cls(list(items))

    def eligible(self, category: str) -> list[PantryItem]:
        """Return items usable for a meal slot, in pantry order."""
        return [
            item
            for item in self.items
            if category in item.categories and self.available(item.id) > 0
        ]

    def available(self, item_id: str) -> float:
        """Return the remaining quantity of an item."""
        position = self._index.get(item_id)
        if position is None:
            return 0
        return self._quantities[position]

    def take(self, item_id: str, quantity: float) -> None:
        """Deduct ``quantity`` from an item."""
        position = self._index.get(item_id)
        if position is None:
            raise ValueError(f"Unknown pantry item: {item_id}")
        remaining = self._quantities[position]
        if quantity < 0 or quantity > remaining:
            raise ValueError(
                f"Cannot take {quantity} of {item_id}: {remaining} available"
            )
        self._quantities[position] = remaining - quantity

    def used(self, item_id: str) -> float:
        """Return how much of an item has been taken so far."""
        position = self._index.get(item_id)
        if position is None:
            return 0
        return self.items[position].quantity - self._quantities[position]
