"""GenerationRules: the user-tunable inputs of menu generation (one per store)."""
import math
from typing import Iterable, List, Optional

from weekmenu.utilities.constants import DEFAULT_RULES, UNIQUENESS_VARIETY_THRESHOLD


def _unique_ids(values: Optional[Iterable]) -> List[str]:
    # Keep first-seen order so persisted lists stay stable across saves
    result: List[str] = []
    for v in values or []:
        if isinstance(v, str) and v and v not in result:
            result.append(v)
    return result


def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _as_float(value, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


class GenerationRules:
    def __init__(self, servings: int = DEFAULT_RULES["servings"], budget: float = DEFAULT_RULES["budget"],
                 variety: int = DEFAULT_RULES["variety"], include_ids: Optional[List[str]] = None,
                 exclude_ids: Optional[List[str]] = None, sample_bias: float = DEFAULT_RULES["sampleBias"],
                 max_prep_minutes: int = DEFAULT_RULES["maxPrepMinutes"]):
        self.servings = max(1, servings)
        self.budget = max(0.0, budget)
        self.variety = variety
        self.include_ids = _unique_ids(include_ids)
        self.exclude_ids = _unique_ids(exclude_ids)
        self.sample_bias = max(0.0, sample_bias)
        self.max_prep_minutes = max_prep_minutes

    @property
    def enforce_unique(self) -> bool:
        return self.variety >= UNIQUENESS_VARIETY_THRESHOLD

    def copy(self) -> "GenerationRules":
        return GenerationRules.from_dict(self.to_dict())

    def normalized(self) -> "GenerationRules":
        """Return a copy whose include and exclude lists are disjoint.

        An id present in both lists is kept only in exclude_ids.
        """
        rules = self.copy()
        excluded = set(rules.exclude_ids)
        rules.include_ids = [i for i in rules.include_ids if i not in excluded]
        return rules

    def toggle_include(self, recipe_id: str) -> "GenerationRules":
        '''Adds or removes recipe_id from include_ids; adding removes it from exclude_ids.'''
        if recipe_id in self.include_ids:
            self.include_ids.remove(recipe_id)
        else:
            self.include_ids.append(recipe_id)
            if recipe_id in self.exclude_ids:
                self.exclude_ids.remove(recipe_id)
        return self

    def toggle_exclude(self, recipe_id: str) -> "GenerationRules":
        '''Adds or removes recipe_id from exclude_ids; adding removes it from include_ids.'''
        if recipe_id in self.exclude_ids:
            self.exclude_ids.remove(recipe_id)
        else:
            self.exclude_ids.append(recipe_id)
            if recipe_id in self.include_ids:
                self.include_ids.remove(recipe_id)
        return self

    def __str__(self) -> str:
        return (f"Rules(servings={self.servings}, budget={self.budget}, variety={self.variety}, "
                f"include={len(self.include_ids)}, exclude={len(self.exclude_ids)}, bias={self.sample_bias})")

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, GenerationRules):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Builds rules from a persisted dict. Unknown keys are ignored, missing keys take defaults.

        Accepts the older field names costLimit, includeRecipeIds and excludeRecipeIds.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        budget = d.get("budget", d.get("costLimit", DEFAULT_RULES["budget"]))
        include = d.get("includeIds", d.get("includeRecipeIds"))
        exclude = d.get("excludeIds", d.get("excludeRecipeIds"))
        return GenerationRules(
            servings=_as_int(d.get("servings"), DEFAULT_RULES["servings"]),
            budget=_as_float(budget, DEFAULT_RULES["budget"]),
            variety=_as_int(d.get("variety"), DEFAULT_RULES["variety"]),
            include_ids=include if isinstance(include, list) else [],
            exclude_ids=exclude if isinstance(exclude, list) else [],
            sample_bias=_as_float(d.get("sampleBias"), DEFAULT_RULES["sampleBias"]),
            max_prep_minutes=_as_int(d.get("maxPrepMinutes"), DEFAULT_RULES["maxPrepMinutes"]),
        )

    def to_dict(self):
        return {
            "servings": self.servings,
            "budget": self.budget,
            "variety": self.variety,
            "includeIds": list(self.include_ids),
            "excludeIds": list(self.exclude_ids),
            "sampleBias": self.sample_bias,
            "maxPrepMinutes": self.max_prep_minutes,
        }
