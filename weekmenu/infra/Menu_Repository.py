"""Working menu repository: the live seven-day menu and the operations on it."""
import logging
from datetime import date
from typing import List, Optional

from weekmenu.domain.Menu import WeeklyMenu
from weekmenu.domain.ShoppingItem import ShoppingItem
from weekmenu.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from weekmenu.events.event_helpers import publish_menu_generated, publish_history_appended
from weekmenu.infra.History_Repository import HistoryRepository
from weekmenu.infra.Key_Value_Store import KeyValueStore
from weekmenu.infra.Recipe_Repository import RecipeRepository
from weekmenu.infra.Rules_Repository import RulesRepository
from weekmenu.infra.Sample_Week_Repository import SampleWeekRepository
from weekmenu.logic.generation.generator import build_next_7_days, generate_menu
from weekmenu.logic.generation.reveal import RevealScheduler
from weekmenu.logic.shopping.list_builder import build_shopping_list
from weekmenu.utilities.constants import WORKING_MENU_KEY

logger = logging.getLogger(__name__)


class MenuRepository:
    def __init__(self, store: KeyValueStore, scheduler: Optional[RevealScheduler] = None,
                 bus: EventBus = GLOBAL_EVENT_BUS):
        self.store = store
        self.scheduler = scheduler
        self.bus = bus
        self.recipes = RecipeRepository(store)
        self.rules = RulesRepository(store)
        self.samples = SampleWeekRepository(store)
        self.history = HistoryRepository(store)

    def get_working_menu(self) -> WeeklyMenu:
        """Stored working menu; a fresh week starting today when none (or a malformed one) is stored."""
        data = self.store.get(WORKING_MENU_KEY)
        if isinstance(data, dict):
            menu = WeeklyMenu.from_dict(data)
            try:
                return menu.validate()
            except ValueError as e:
                logger.warning(f"Stored working menu is malformed, starting a new week: {e}")
        return self.new_week()

    def save(self, menu: WeeklyMenu) -> WeeklyMenu:
        menu.validate()
        self.store.put(WORKING_MENU_KEY, menu.to_dict())
        return menu

    def new_week(self, start: Optional[date] = None) -> WeeklyMenu:
        if self.scheduler is not None:
            self.scheduler.cancel()
        menu = WeeklyMenu(build_next_7_days(start), rules=self.rules.load())
        return self.save(menu)

    def toggle_lock(self, index: int) -> WeeklyMenu:
        menu = self.get_working_menu()
        day = menu.days[index]
        day.locked = not day.locked
        return self.save(menu)

    def assign_day(self, index: int, recipe_id: Optional[str]) -> WeeklyMenu:
        """Manually set (or clear) the recipe of one day. Locked days cannot be changed."""
        menu = self.get_working_menu()
        day = menu.days[index]
        if day.locked:
            raise ValueError(f"Day {day.date} is locked")
        if recipe_id is not None and self.recipes.get(recipe_id) is None:
            raise ValueError(f"Unknown recipe id '{recipe_id}'")
        day.recipe_id = recipe_id
        return self.save(menu)

    def generate_week(self) -> WeeklyMenu:
        """Regenerate every unlocked day, store the result and append it to history.

        The finalized menu gets a new id and a snapshot of the current rules. When a
        reveal scheduler is configured the days are then announced one by one.
        """
        rules = self.rules.load()
        working = self.get_working_menu()
        days = generate_menu(self.recipes.list(), rules, working.days, self.samples.list())
        menu = WeeklyMenu(days, rules=rules)
        self.save(menu)
        self.history.add(menu)
        publish_menu_generated(self.bus, menu.to_dict())
        publish_history_appended(self.bus, menu.id, len(self.history.list()))
        if self.scheduler is not None:
            self.scheduler.start(menu)
        return menu

    def regenerate_day(self, index: int) -> WeeklyMenu:
        """Regenerate a single day; the other days' recipes count as already used."""
        rules = self.rules.load()
        menu = self.get_working_menu()
        others = [d.recipe_id for i, d in enumerate(menu.days) if i != index and d.recipe_id]
        [day] = generate_menu(self.recipes.list(), rules, [menu.days[index]], self.samples.list(),
                              reserved_ids=others)
        menu.days[index] = day
        menu.rules = rules
        return self.save(menu)

    def shopping_list(self, menu: Optional[WeeklyMenu] = None) -> List[ShoppingItem]:
        menu = menu or self.get_working_menu()
        return build_shopping_list(menu.days, self.recipes.list(), menu.rules.servings)
