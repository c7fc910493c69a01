from typing import Final

# Storage keys (one JSON value per key)
RECIPES_KEY: Final[str] = "recipes"
SAMPLE_WEEKS_KEY: Final[str] = "sample-weeks"
HISTORY_KEY: Final[str] = "menu-history"
RULES_KEY: Final[str] = "generationRules"
WORKING_MENU_KEY: Final[str] = "working-menu"

INGREDIENT_CATEGORIES: Final[tuple[str, ...]] = (
    "produce", "protein", "dairy", "dry", "spice", "bakery", "frozen", "other",
)
DEFAULT_CATEGORY: Final[str] = "other"

RECIPE_SORT_KEYS: Final[tuple[str, ...]] = ("name", "createdAt", "updatedAt", "cost")
SORT_DIRECTIONS: Final[tuple[str, ...]] = ("asc", "desc")

DAYS_IN_WEEK: Final[int] = 7
UNIQUENESS_VARIETY_THRESHOLD: Final[int] = 3

DEFAULT_RULES: Final[dict] = {
    "servings": 2,
    "budget": 100.0,
    "variety": 5,
    "includeIds": [],
    "excludeIds": [],
    "sampleBias": 1.0,
    "maxPrepMinutes": 45,
}
