import unittest
from weekmenu.domain.Ingredient import Ingredient
from weekmenu.domain.Recipe import Recipe, recipe_cost


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.garlic = Ingredient("Garlic", "g", 5, "produce", 0.1)
        self.pasta = Ingredient("Spaghetti", "g", 200, "dry", 0.01)
        self.cheese = Ingredient("Parmesan", "g", 30, "dairy", 0.05)

    def test_cost_sums_cost_times_quantity(self):
        recipe = Recipe(id="r1", name="Aglio e Olio", ingredients=[self.garlic, self.pasta])
        self.assertAlmostEqual(recipe.cost(), 0.5 + 2.0)
        self.assertAlmostEqual(recipe_cost(recipe), recipe.cost())

    def test_cost_is_additive(self):
        a = [self.garlic, self.pasta]
        b = [self.cheese]
        whole = Recipe(id="ab", name="AB", ingredients=a + b)
        self.assertAlmostEqual(
            whole.cost(),
            Recipe(id="a", name="A", ingredients=a).cost() + Recipe(id="b", name="B", ingredients=b).cost()
        )

    def test_zero_ingredient_recipe_costs_nothing(self):
        self.assertEqual(Recipe(id="empty", name="Water").cost(), 0)

    def test_from_dict_round_trip(self):
        data = {
            "id": "r1", "name": "Soup", "description": "Warm",
            "ingredients": [{"name": "Leek", "unit": "pcs", "quantity": 2, "category": "produce", "cost": 0.8}],
            "createdAt": "2026-01-01T00:00:00+00:00", "updatedAt": "2026-01-02T00:00:00+00:00",
        }
        self.assertEqual(Recipe.from_dict(data).to_dict(), data)

    def test_from_dict_is_tolerant(self):
        recipe = Recipe.from_dict({
            "id": "r2", "name": "Odd", "unknown": True,
            "ingredients": [{"name": "Salt", "quantity": "lots", "cost": -3, "category": "minerals"}, "junk"],
        })
        self.assertEqual(len(recipe.ingredients), 1)
        salt = recipe.ingredients[0]
        self.assertEqual(salt.quantity, 0)
        self.assertEqual(salt.cost, 0)
        self.assertEqual(salt.category, "other")
        self.assertIsNone(recipe.description)
        self.assertTrue(recipe.created_at)

    def test_missing_id_gets_generated(self):
        self.assertTrue(Recipe(name="New").id.startswith("recipe-"))


class TestIngredient(unittest.TestCase):

    def test_line_cost(self):
        ingredient = Ingredient("Milk", "ml", 300, "dairy", 0.002)
        self.assertAlmostEqual(ingredient.line_cost(), 0.6)
        self.assertAlmostEqual(ingredient.line_cost(2), 1.2)

    def test_unknown_category_becomes_other(self):
        self.assertEqual(Ingredient("Thing", "pcs", 1, "gadgets").category, "other")
