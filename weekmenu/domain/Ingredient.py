"""Ingredient domain entity: name, unit, quantity, aisle category, cost per unit."""
import math

from weekmenu.utilities.constants import INGREDIENT_CATEGORIES, DEFAULT_CATEGORY


def _non_negative(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if 0 < number < math.inf else 0.0


class Ingredient:
    def __init__(self, name: str = "", unit: str = "", quantity: float = 0,
                 category: str = DEFAULT_CATEGORY, cost: float = 0):
        self.name = name
        self.unit = unit
        self.quantity = quantity
        self.category = category if category in INGREDIENT_CATEGORIES else DEFAULT_CATEGORY
        self.cost = cost

    def line_cost(self, multiplier: float = 1) -> float:
        '''Cost of this line scaled by multiplier (cost per unit x quantity).'''
        return self.cost * self.quantity * multiplier

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit} ({self.category}) @ {self.cost}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys, clamps negative numbers to 0.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=str(d.get("name") or ""),
            unit=str(d.get("unit") or ""),
            quantity=_non_negative(d.get("quantity", 0)),
            category=str(d.get("category") or DEFAULT_CATEGORY),
            cost=_non_negative(d.get("cost", 0)),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "unit": self.unit,
            "quantity": self.quantity,
            "category": self.category,
            "cost": self.cost,
        }
