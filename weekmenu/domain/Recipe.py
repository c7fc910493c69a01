"""Recipe domain entity: id, name, optional description, ingredient lines, timestamps."""
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from weekmenu.domain.Ingredient import Ingredient


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4()}"


class Recipe:
    def __init__(self, id: str = "", name: str = "", description: Optional[str] = None,
                 ingredients: Optional[List[Ingredient]] = None,
                 created_at: str = "", updated_at: str = ""):
        self.id = id or new_id("recipe")
        self.name = name
        self.description = description
        self.ingredients = ingredients[:] if ingredients else []
        stamp = now_iso()
        self.created_at = created_at or stamp
        self.updated_at = updated_at or self.created_at

    def cost(self) -> float:
        """Sum of cost x quantity over all ingredient lines; 0 when there are none."""
        return recipe_cost(self)

    def categories(self) -> set:
        return {ing.category for ing in self.ingredients}

    def __str__(self) -> str:
        return f"{self.name} ({self.id}) - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        description = d.get("description")
        ingredients = d.get("ingredients")
        if not isinstance(ingredients, list):
            ingredients = []
        return Recipe(
            id=str(d.get("id") or ""),
            name=str(d.get("name") or ""),
            description=description if isinstance(description, str) and description else None,
            ingredients=[Ingredient.from_dict(ing) for ing in ingredients if isinstance(ing, dict)],
            created_at=str(d.get("createdAt") or ""),
            updated_at=str(d.get("updatedAt") or ""),
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.description:
            data["description"] = self.description
        return data


def recipe_cost(recipe: Recipe) -> float:
    return sum(ing.cost * ing.quantity for ing in recipe.ingredients)


def name_sort_key(name: str):
    """Alphabetical, ignoring case first; on a case-only difference lowercase sorts first."""
    return name.casefold(), name.swapcase()
