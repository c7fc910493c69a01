"""Menu domain entities: MenuDay (one dated slot) and WeeklyMenu (seven consecutive days)."""
from datetime import date, timedelta
from typing import List, Optional

from weekmenu.domain.Recipe import new_id, now_iso
from weekmenu.domain.Rules import GenerationRules
from weekmenu.utilities.constants import DAYS_IN_WEEK


def parse_day(value: str) -> date:
    # Accepts plain ISO dates and full ISO timestamps
    return date.fromisoformat(str(value)[:10])


class MenuDay:
    def __init__(self, date: str, recipe_id: Optional[str] = None, locked: bool = False):
        self.date = date
        self.recipe_id = recipe_id
        self.locked = locked

    def copy(self) -> "MenuDay":
        return MenuDay(self.date, self.recipe_id, self.locked)

    def __str__(self) -> str:
        lock = " [locked]" if self.locked else ""
        return f"{self.date}: {self.recipe_id or '-'}{lock}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, MenuDay):
            return NotImplemented
        return (self.date, self.recipe_id, self.locked) == (other.date, other.recipe_id, other.locked)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        recipe_id = d.get("recipeId")
        return MenuDay(
            date=str(d.get("date") or ""),
            recipe_id=recipe_id if isinstance(recipe_id, str) and recipe_id else None,
            locked=bool(d.get("locked", False)),
        )

    def to_dict(self):
        return {"date": self.date, "recipeId": self.recipe_id, "locked": self.locked}


class WeeklyMenu:
    def __init__(self, days: List[MenuDay], rules: Optional[GenerationRules] = None,
                 id: str = "", week_start: str = "", created_at: str = ""):
        self.id = id or new_id("menu")
        self.days = days[:]
        self.rules = rules.copy() if rules else GenerationRules()
        self.week_start = week_start or (days[0].date if days else "")
        self.created_at = created_at or now_iso()

    def validate(self) -> "WeeklyMenu":
        """Raise ValueError unless the menu has exactly seven consecutive dated days."""
        if len(self.days) != DAYS_IN_WEEK:
            raise ValueError(f"Weekly menu must have {DAYS_IN_WEEK} days, got {len(self.days)}")
        try:
            dates = [parse_day(d.date) for d in self.days]
        except ValueError as e:
            raise ValueError(f"Weekly menu has an invalid day date: {e}") from e
        for previous, current in zip(dates, dates[1:]):
            if current - previous != timedelta(days=1):
                raise ValueError(f"Weekly menu dates must be consecutive: {previous} -> {current}")
        return self

    def recipe_ids(self) -> List[str]:
        return [d.recipe_id for d in self.days if d.recipe_id]

    def copy(self) -> "WeeklyMenu":
        return WeeklyMenu.from_dict(self.to_dict())

    def __str__(self) -> str:
        days = ", ".join(str(d) for d in self.days)
        return f"WeeklyMenu {self.id} from {self.week_start}: {days}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        days = d.get("days")
        if not isinstance(days, list):
            days = []
        return WeeklyMenu(
            days=[MenuDay.from_dict(day) for day in days if isinstance(day, dict)],
            rules=GenerationRules.from_dict(d.get("rules")),
            id=str(d.get("id") or ""),
            week_start=str(d.get("weekStart") or ""),
            created_at=str(d.get("createdAt") or ""),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "weekStart": self.week_start,
            "createdAt": self.created_at,
            "rules": self.rules.to_dict(),
            "days": [day.to_dict() for day in self.days],
        }
