"""Shopping list builder.

Provides build_shopping_list(days, recipes, servings): aggregates the ingredients
of every assigned day, scaled by servings, into one line per (name, unit, category).
"""
from typing import Dict, List, Tuple

from weekmenu.domain.Menu import MenuDay
from weekmenu.domain.Recipe import Recipe
from weekmenu.domain.ShoppingItem import ShoppingItem


def build_shopping_list(days: List[MenuDay], recipes: List[Recipe], servings: float) -> List[ShoppingItem]:
    """Compute the aggregated shopping list for a week.

    Args:
        days: menu days; unassigned days and ids missing from recipes are skipped.
        recipes: the recipe catalog.
        servings: multiplier applied to every ingredient quantity.

    Returns:
        ShoppingItems sorted by category, then name, then unit.
    """
    recipe_index: Dict[str, Recipe] = {r.id: r for r in recipes}
    items: Dict[Tuple[str, str, str], ShoppingItem] = {}

    for day in days:
        if not day.recipe_id:
            continue
        recipe = recipe_index.get(day.recipe_id)
        if recipe is None:
            continue
        for ing in recipe.ingredients:
            quantity = ing.quantity * servings
            cost = ing.cost * quantity
            key = (ing.name, ing.unit, ing.category)
            if key in items:
                items[key].add(quantity, cost)
            else:
                items[key] = ShoppingItem(ing.name, ing.unit, ing.category, quantity, cost)

    return sorted(items.values(), key=lambda item: (item.category, item.name, item.unit))


__all__ = ['build_shopping_list']
