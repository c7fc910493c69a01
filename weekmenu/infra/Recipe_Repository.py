"""Recipe repository: the recipe catalog persisted under the 'recipes' key."""
import logging
from typing import List, Optional, Sequence

from weekmenu.domain.Recipe import Recipe, now_iso
from weekmenu.infra.Key_Value_Store import KeyValueStore
from weekmenu.logic.recipes.listing import list_recipes_with_options
from weekmenu.utilities.constants import RECIPES_KEY

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def _read(self) -> List[Recipe]:
        data = self.store.get(RECIPES_KEY, [])
        if not isinstance(data, list):
            logger.warning("Recipes value is not a list; treating as empty.")
            return []
        recipes: List[Recipe] = []
        seen = set()
        for entry in data:
            if not isinstance(entry, dict) or not entry.get("id"):
                continue
            recipe = Recipe.from_dict(entry)
            if recipe.id in seen:
                logger.warning(f"Duplicate recipe id {recipe.id} in store; keeping first occurrence.")
                continue
            seen.add(recipe.id)
            recipes.append(recipe)
        return recipes

    def _write(self, recipes: List[Recipe]) -> None:
        self.store.put(RECIPES_KEY, [r.to_dict() for r in recipes])

    def list(self) -> List[Recipe]:
        return self._read()

    def list_with_options(self, search: Optional[str] = None, categories: Optional[Sequence[str]] = None,
                          sort_key: str = "updatedAt", sort_direction: str = "desc") -> List[Recipe]:
        return list_recipes_with_options(self._read(), search, categories, sort_key, sort_direction)

    def get(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self._read():
            if recipe.id == recipe_id:
                return recipe
        return None

    def create(self, recipe: Recipe) -> Recipe:
        recipes = self._read()
        if any(r.id == recipe.id for r in recipes):
            logger.warning(f"Rejected recipe with existing id {recipe.id}")
            raise ValueError(f"Recipe with id '{recipe.id}' already exists")
        recipes.append(recipe)
        self._write(recipes)
        logger.info(f"Recipe created: {recipe.name} ({recipe.id})")
        return recipe

    def update(self, recipe: Recipe) -> Optional[Recipe]:
        """Replace the stored recipe with the same id. Returns None when the id is unknown."""
        recipes = self._read()
        for index, existing in enumerate(recipes):
            if existing.id == recipe.id:
                recipe.created_at = existing.created_at
                recipe.updated_at = now_iso()
                recipes[index] = recipe
                self._write(recipes)
                return recipe
        return None

    def delete(self, recipe_id: str) -> bool:
        # No cascade: menus and history keep the dangling id
        recipes = self._read()
        remaining = [r for r in recipes if r.id != recipe_id]
        if len(remaining) == len(recipes):
            return False
        self._write(remaining)
        logger.info(f"Recipe deleted: {recipe_id}")
        return True
