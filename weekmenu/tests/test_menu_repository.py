import unittest
from datetime import date
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.domain.Recipe import Recipe
from weekmenu.domain.Rules import GenerationRules
from weekmenu.domain.SampleWeek import SampleWeek
from weekmenu.events.Event_Bus import EventBus, MENU_GENERATED, HISTORY_APPENDED
from weekmenu.infra.Key_Value_Store import InMemoryStore
from weekmenu.infra.Menu_Repository import MenuRepository

NAMES = ["Arancini", "Bibimbap", "Cassoulet", "Dumplings", "Empanadas", "Fajitas", "Goulash", "Halloumi Wrap"]


class TestMenuRepository(unittest.TestCase):

    def setUp(self):
        self.store = InMemoryStore()
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(MENU_GENERATED, lambda name, payload: self.events.append(name))
        self.bus.subscribe(HISTORY_APPENDED, lambda name, payload: self.events.append(name))
        self.repo = MenuRepository(self.store, bus=self.bus)
        for i, name in enumerate(NAMES):
            self.repo.recipes.create(Recipe(id=f"r{i}", name=name, ingredients=[
                Ingredient("Onion", "pcs", 1, "produce", 0.5),
                Ingredient(f"{name} base", "g", 100, "other", 0.01 * (i + 1)),
            ]))
        self.repo.rules.save(GenerationRules(servings=2, budget=0, variety=5))

    def test_working_menu_created_on_first_read(self):
        menu = self.repo.get_working_menu()
        self.assertEqual(len(menu.days), 7)
        self.assertEqual(menu.days[0].date, date.today().isoformat())
        self.assertEqual(self.repo.get_working_menu().id, menu.id)

    def test_malformed_working_menu_is_replaced(self):
        self.store.put("working-menu", {"id": "broken", "days": [{"date": "2026-10-19"}]})
        menu = self.repo.get_working_menu()
        self.assertNotEqual(menu.id, "broken")
        self.assertEqual(len(menu.days), 7)

    def test_generate_week_fills_days_and_appends_history(self):
        menu = self.repo.generate_week()
        ids = menu.recipe_ids()
        self.assertEqual(len(ids), 7)
        self.assertEqual(len(set(ids)), 7)
        history = self.repo.history.list()
        self.assertEqual([m.id for m in history], [menu.id])
        self.assertEqual(self.repo.get_working_menu().id, menu.id)
        self.assertEqual(self.events, [MENU_GENERATED, HISTORY_APPENDED])

    def test_generate_week_respects_locks(self):
        self.repo.assign_day(2, "r7")
        self.repo.toggle_lock(2)
        menu = self.repo.generate_week()
        self.assertEqual(menu.days[2].recipe_id, "r7")
        self.assertTrue(menu.days[2].locked)
        self.assertNotIn("r7", [d.recipe_id for i, d in enumerate(menu.days) if i != 2])

    def test_later_edits_do_not_touch_history(self):
        menu = self.repo.generate_week()
        self.repo.assign_day(0, None)
        self.assertEqual(self.repo.history.list()[0].days[0].recipe_id, menu.days[0].recipe_id)

    def test_regenerate_day_avoids_other_days(self):
        self.repo.generate_week()
        menu = self.repo.assign_day(0, "r7")
        updated = self.repo.regenerate_day(3)
        # day 0 gave up r0, which ranks ahead of the current r3
        self.assertEqual(updated.days[3].recipe_id, "r0")
        self.assertEqual(len(self.repo.history.list()), 1)
        self.assertEqual([d.recipe_id for i, d in enumerate(updated.days) if i != 3],
                         [d.recipe_id for i, d in enumerate(menu.days) if i != 3])

    def test_regenerate_locked_day_is_noop(self):
        self.repo.generate_week()
        before = self.repo.toggle_lock(1).days[1]
        after = self.repo.regenerate_day(1).days[1]
        self.assertEqual(before, after)

    def test_assign_day_validation(self):
        with self.assertRaises(ValueError):
            self.repo.assign_day(0, "unknown")
        self.repo.toggle_lock(0)
        with self.assertRaises(ValueError):
            self.repo.assign_day(0, "r1")

    def test_shopping_list_uses_menu_servings(self):
        self.repo.generate_week()
        items = self.repo.shopping_list()
        onion = [i for i in items if i.name == "Onion"][0]
        self.assertAlmostEqual(onion.quantity, 14)
        self.assertAlmostEqual(onion.cost, 7.0)

    def test_deleted_recipe_is_tolerated(self):
        menu = self.repo.generate_week()
        self.repo.recipes.delete(menu.days[0].recipe_id)
        items = self.repo.shopping_list()
        onion = [i for i in items if i.name == "Onion"][0]
        self.assertAlmostEqual(onion.quantity, 12)
        self.assertEqual(self.repo.get_working_menu().days[0].recipe_id, menu.days[0].recipe_id)

    def test_sample_weeks_bias_generation(self):
        self.repo.rules.save(GenerationRules(servings=2, budget=0, variety=1, sample_bias=1))
        self.repo.samples.add(SampleWeek("Favourite", ["r5"] * 7))
        menu = self.repo.generate_week()
        self.assertEqual(set(menu.recipe_ids()), {"r5"})

    def test_new_week_resets_days(self):
        self.repo.generate_week()
        menu = self.repo.new_week(date(2026, 11, 2))
        self.assertEqual(menu.week_start, "2026-11-02")
        self.assertEqual(menu.recipe_ids(), [])
