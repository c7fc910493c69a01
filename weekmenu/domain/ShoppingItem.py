"""ShoppingItem: one aggregated shopping line, keyed by (name, unit, category)."""


class ShoppingItem:
    def __init__(self, name: str, unit: str, category: str, quantity: float = 0, cost: float = 0):
        self.name = name
        self.unit = unit
        self.category = category
        self.quantity = quantity
        self.cost = cost

    @property
    def key(self):
        return (self.name, self.unit, self.category)

    def add(self, quantity: float, cost: float):
        self.quantity += quantity
        self.cost += cost

    def __str__(self) -> str:
        return f"[{self.category}] {self.name} - {self.quantity} {self.unit} ({self.cost:.2f})"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return {
            "name": self.name,
            "unit": self.unit,
            "category": self.category,
            "quantity": self.quantity,
            "cost": self.cost,
        }
