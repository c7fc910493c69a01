"""Cost reporting for the recipe catalog and weekly menus."""
from typing import Any, Dict, List

from weekmenu.domain.Menu import WeeklyMenu
from weekmenu.domain.Recipe import Recipe, recipe_cost


def average_recipe_cost(recipes: List[Recipe]) -> float:
    if not recipes:
        return 0.0
    return sum(recipe_cost(r) for r in recipes) / len(recipes)


def summarize_menu_cost(menu: WeeklyMenu, recipes: List[Recipe]) -> Dict[str, Any]:
    """Per-day and total cost of a menu, scaled by the menu's servings.

    Returns structure:
    {
      'days': [ { 'date': str, 'recipeId': str|None, 'name': str|None, 'cost': float }, ... ],
      'total': float, 'budget': float, 'over_budget': bool, 'unassigned': int
    }
    Days whose recipe no longer exists count as unassigned with cost 0.
    """
    index = {r.id: r for r in recipes}
    servings = menu.rules.servings
    days = []
    total = 0.0
    unassigned = 0
    for day in menu.days:
        recipe = index.get(day.recipe_id) if day.recipe_id else None
        if recipe is None:
            unassigned += 1
            days.append({'date': day.date, 'recipeId': day.recipe_id, 'name': None, 'cost': 0.0})
            continue
        cost = recipe_cost(recipe) * servings
        total += cost
        days.append({'date': day.date, 'recipeId': recipe.id, 'name': recipe.name, 'cost': cost})
    budget = menu.rules.budget
    return {
        'days': days,
        'total': total,
        'budget': budget,
        'over_budget': budget > 0 and total > budget,
        'unassigned': unassigned,
    }

__all__ = ["average_recipe_cost", "summarize_menu_cost"]
