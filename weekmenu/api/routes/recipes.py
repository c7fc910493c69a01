import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from weekmenu.api.deps import get_recipe_repository
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.domain.Recipe import Recipe
from weekmenu.infra.Recipe_Repository import RecipeRepository
from weekmenu.logic.reporting.costs import average_recipe_cost
from weekmenu.utilities.constants import INGREDIENT_CATEGORIES
from weekmenu.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])
logger = logging.getLogger(__name__)


def recipe_payload(recipe: Recipe) -> dict:
    data = recipe.to_dict()
    data["cost"] = recipe.cost()
    return data


def _from_input(payload: RecipeInput, recipe_id: Optional[str] = None) -> Recipe:
    return Recipe(
        id=recipe_id or payload.id or "",
        name=payload.name,
        description=payload.description,
        ingredients=[Ingredient.from_dict(ing.model_dump()) for ing in payload.ingredients],
    )


@router.get("")
def list_recipes(search: Optional[str] = Query(default=None),
                 categories: List[str] = Query(default=[]),
                 sort_key: str = Query(default="updatedAt", pattern=r'^(name|createdAt|updatedAt|cost)$'),
                 sort_direction: str = Query(default="desc", pattern=r'^(asc|desc)$'),
                 repo: RecipeRepository = Depends(get_recipe_repository)):
    """Filtered, sorted catalog plus the average cost of what matched."""
    recipes = repo.list_with_options(search, categories, sort_key, sort_direction)
    return {
        "items": [recipe_payload(r) for r in recipes],
        "count": len(recipes),
        "total": len(repo.list()),
        "average_cost": average_recipe_cost(recipes),
    }


@router.get("/categories")
def list_categories(repo: RecipeRepository = Depends(get_recipe_repository)):
    """Categories used by at least one stored ingredient, plus the full allowed set."""
    used = set()
    for recipe in repo.list():
        used |= recipe.categories()
    return {"used": sorted(used), "all": list(INGREDIENT_CATEGORIES)}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe_payload(recipe)


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        recipe = repo.create(_from_input(payload))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return recipe_payload(recipe)


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, payload: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.update(_from_input(payload, recipe_id))
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe_payload(recipe)


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    if not repo.delete(recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"deleted": recipe_id}
