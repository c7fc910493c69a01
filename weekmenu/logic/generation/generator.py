"""Deterministic weekly menu generator.

Provides generate_menu(recipes, rules, days, sample_weeks) and the helpers that
build a fresh seven-day week. No randomness: identical inputs (including the
order of recipes) always give the same assignment.
"""
import logging
from collections import Counter
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from weekmenu.domain.Menu import MenuDay, WeeklyMenu
from weekmenu.domain.Recipe import Recipe, name_sort_key, recipe_cost
from weekmenu.domain.Rules import GenerationRules
from weekmenu.domain.SampleWeek import SampleWeek
from weekmenu.utilities.constants import DAYS_IN_WEEK

logger = logging.getLogger(__name__)


def build_next_7_days(start: Optional[date] = None) -> List[MenuDay]:
    """Seven empty, unlocked days starting at start (default: today)."""
    first = start or date.today()
    return [MenuDay((first + timedelta(days=i)).isoformat()) for i in range(DAYS_IN_WEEK)]


def build_sample_weights(sample_weeks: Iterable[SampleWeek]) -> Dict[str, int]:
    """Number of sample weeks listing each recipe id (an id repeated inside one week counts each time)."""
    counts: Counter = Counter()
    for sample in sample_weeks:
        counts.update(sample.recipe_ids)
    return dict(counts)


def build_recipe_pool(recipes: Iterable[Recipe], rules: GenerationRules) -> List[Recipe]:
    excluded = set(rules.exclude_ids)
    return [r for r in recipes if r.id not in excluded]


def _rank_key(rules: GenerationRules, sample_weights: Dict[str, int]):
    included = set(rules.include_ids)
    use_cost = rules.budget > 0

    def key(recipe: Recipe):
        return (
            0 if recipe.id in included else 1,
            -(sample_weights.get(recipe.id, 0) * rules.sample_bias),
            recipe_cost(recipe) if use_cost else 0,
            name_sort_key(recipe.name),
        )
    return key


def pick_recipe(pool: List[Recipe], used_ids: Iterable[str], rules: GenerationRules,
                sample_weights: Dict[str, int]) -> Optional[Recipe]:
    """Top-ranked candidate for one day, or None when the pool is empty.

    With uniqueness on, already used ids are skipped unless that leaves nothing,
    in which case repeats are allowed.
    """
    if not pool:
        return None
    candidates = pool
    if rules.enforce_unique:
        used = set(used_ids)
        fresh = [r for r in pool if r.id not in used]
        candidates = fresh or pool
    # min() keeps the first of equal keys, same as a stable sort's head
    return min(candidates, key=_rank_key(rules, sample_weights))


def generate_menu(recipes: List[Recipe], rules: GenerationRules, days: List[MenuDay],
                  sample_weeks: List[SampleWeek], reserved_ids: Optional[Iterable[str]] = None) -> List[MenuDay]:
    """Assign a recipe to every unlocked day.

    Args:
        recipes: the catalog.
        rules: generation rules; excluded ids never enter the pool.
        days: the current week (1..7 days). Locked days are returned unchanged.
        sample_weeks: liked weeks used only to weight the ranking.
        reserved_ids: ids treated as already used before the pass (single-day regeneration
            passes the other days of the week here).

    Returns:
        A new list of days in the same order with the same dates.
    """
    pool = build_recipe_pool(recipes, rules)
    sample_weights = build_sample_weights(sample_weeks)
    used_ids: List[str] = [d.recipe_id for d in days if d.locked and d.recipe_id]
    used_ids.extend(i for i in reserved_ids or [] if i)

    result: List[MenuDay] = []
    for day in days:
        if day.locked:
            result.append(day.copy())
            continue
        recipe = pick_recipe(pool, used_ids, rules, sample_weights)
        if recipe is not None:
            used_ids.append(recipe.id)
        result.append(MenuDay(day.date, recipe.id if recipe else None, False))

    assigned = sum(1 for d in result if d.recipe_id)
    logger.info(f"Generated {len(result)} day(s): pool={len(pool)} assigned={assigned} unique={rules.enforce_unique}")
    return result


def build_weekly_menu(recipes: List[Recipe], rules: GenerationRules, sample_weeks: List[SampleWeek],
                      start: Optional[date] = None) -> WeeklyMenu:
    days = generate_menu(recipes, rules, build_next_7_days(start), sample_weeks)
    return WeeklyMenu(days, rules=rules)


__all__ = ['build_next_7_days', 'build_sample_weights', 'build_recipe_pool', 'pick_recipe',
           'generate_menu', 'build_weekly_menu']
