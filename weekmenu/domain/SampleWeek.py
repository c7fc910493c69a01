"""SampleWeek: a user-curated exemplar week whose recipe ids bias generation."""
from typing import List, Optional

from weekmenu.domain.Recipe import new_id, now_iso
from weekmenu.utilities.constants import DAYS_IN_WEEK


class SampleWeek:
    def __init__(self, name: str = "", recipe_ids: Optional[List[str]] = None,
                 id: str = "", created_at: str = ""):
        self.id = id or new_id("sample")
        self.name = name
        self.recipe_ids = recipe_ids[:] if recipe_ids else []
        self.created_at = created_at or now_iso()

    def validate(self) -> "SampleWeek":
        if len(self.recipe_ids) != DAYS_IN_WEEK:
            raise ValueError(f"Sample week must list {DAYS_IN_WEEK} recipe ids, got {len(self.recipe_ids)}")
        if not self.name.strip():
            raise ValueError("Sample week name cannot be empty")
        return self

    def __str__(self) -> str:
        return f"{self.name} ({self.id}): {', '.join(self.recipe_ids)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        ids = d.get("recipeIds")
        if not isinstance(ids, list):
            ids = []
        return SampleWeek(
            name=str(d.get("name") or ""),
            recipe_ids=[i for i in ids if isinstance(i, str)],
            id=str(d.get("id") or ""),
            created_at=str(d.get("createdAt") or ""),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "recipeIds": list(self.recipe_ids),
            "createdAt": self.created_at,
        }
