"""Recipe catalog search, category filter and sort for the admin listing."""
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from weekmenu.domain.Recipe import Recipe, name_sort_key, recipe_cost
from weekmenu.utilities.constants import RECIPE_SORT_KEYS, SORT_DIRECTIONS

__all__ = ["filter_recipes_by_search", "filter_recipes_by_categories", "sort_recipes",
           "list_recipes_with_options"]


def filter_recipes_by_search(recipes: List[Recipe], search: Optional[str]) -> List[Recipe]:
    """Case-insensitive substring match on name, description or any ingredient name."""
    term = (search or "").strip().lower()
    if not term:
        return list(recipes)

    def matches(recipe: Recipe) -> bool:
        if term in recipe.name.lower():
            return True
        if recipe.description and term in recipe.description.lower():
            return True
        return any(term in ing.name.lower() for ing in recipe.ingredients)

    return [r for r in recipes if matches(r)]


def filter_recipes_by_categories(recipes: List[Recipe], categories: Optional[Sequence[str]]) -> List[Recipe]:
    """Keep recipes with at least one ingredient in any selected category."""
    if not categories:
        return list(recipes)
    selected = set(categories)
    return [r for r in recipes if any(ing.category in selected for ing in r.ingredients)]


_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _timestamp(value: str) -> datetime:
    # Unparseable stamps sort as the epoch; naive ones are taken as UTC
    try:
        stamp = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    return stamp if stamp.tzinfo else stamp.replace(tzinfo=timezone.utc)


def _sort_value(sort_key: str):
    if sort_key == "name":
        return lambda r: name_sort_key(r.name)
    if sort_key == "createdAt":
        return lambda r: _timestamp(r.created_at)
    if sort_key == "cost":
        return recipe_cost
    return lambda r: _timestamp(r.updated_at)


def sort_recipes(recipes: List[Recipe], sort_key: str = "updatedAt", sort_direction: str = "desc") -> List[Recipe]:
    # sorted() is stable for reverse=True too, so ties keep catalog order
    if sort_key not in RECIPE_SORT_KEYS:
        sort_key = "updatedAt"
    if sort_direction not in SORT_DIRECTIONS:
        sort_direction = "desc"
    return sorted(recipes, key=_sort_value(sort_key), reverse=(sort_direction == "desc"))


def list_recipes_with_options(recipes: List[Recipe], search: Optional[str] = None,
                              categories: Optional[Sequence[str]] = None,
                              sort_key: str = "updatedAt", sort_direction: str = "desc") -> List[Recipe]:
    result = filter_recipes_by_search(recipes, search)
    result = filter_recipes_by_categories(result, categories)
    return sort_recipes(result, sort_key, sort_direction)
