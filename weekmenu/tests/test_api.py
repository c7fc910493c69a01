import unittest
from fastapi.testclient import TestClient
from weekmenu.api.api_run import app
from weekmenu.api.deps import get_store, get_scheduler
from weekmenu.events import web_observers
from weekmenu.infra.Key_Value_Store import InMemoryStore
from weekmenu.logic.generation.reveal import RevealScheduler


class ImmediateTimer:
    """Timer that fires as soon as it is started, so reveals run inline."""

    def __init__(self, interval, function, args=None):
        self.interval = interval
        self.function = function
        self.args = args or ()

    def start(self):
        self.function(*self.args)

    def cancel(self):
        pass


def recipe_body(name, cost=1.0, category="produce", ingredient=None):
    return {
        "name": name,
        "description": f"{name} for dinner",
        "ingredients": [
            {"name": ingredient or f"{name} base", "unit": "g", "quantity": 100, "category": category, "cost": cost / 100},
            {"name": "Garlic", "unit": "clove", "quantity": 2, "category": "produce", "cost": 0.05},
        ],
    }


class TestMenuPlannerAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        web_observers.start()

    @classmethod
    def tearDownClass(cls):
        app.dependency_overrides.clear()

    def setUp(self):
        self.store = InMemoryStore()
        self.scheduler = RevealScheduler(delay=0, timer_factory=ImmediateTimer)
        app.dependency_overrides[get_store] = lambda: self.store
        app.dependency_overrides[get_scheduler] = lambda: self.scheduler
        web_observers.clear()

    def _seed(self, count=8):
        ids = []
        for i in range(count):
            resp = self.client.post('/api/recipes', json=recipe_body(f"Dish {chr(65 + i)}", cost=i + 1))
            self.assertEqual(resp.status_code, 201, resp.text)
            ids.append(resp.json()['id'])
        return ids

    def test_health(self):
        resp = self.client.get('/api/health')
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_recipe_crud(self):
        resp = self.client.post('/api/recipes', json={**recipe_body("Shakshuka"), "id": "shak"})
        self.assertEqual(resp.status_code, 201)
        created = resp.json()
        self.assertEqual(created['id'], 'shak')
        self.assertAlmostEqual(created['cost'], 1.1)

        dup = self.client.post('/api/recipes', json={**recipe_body("Other"), "id": "shak"})
        self.assertEqual(dup.status_code, 400)

        body = recipe_body("Green Shakshuka")
        resp = self.client.put('/api/recipes/shak', json=body)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['name'], "Green Shakshuka")
        self.assertEqual(resp.json()['createdAt'], created['createdAt'])

        self.assertEqual(self.client.get('/api/recipes/shak').status_code, 200)
        self.assertEqual(self.client.delete('/api/recipes/shak').status_code, 200)
        self.assertEqual(self.client.get('/api/recipes/shak').status_code, 404)
        self.assertEqual(self.client.delete('/api/recipes/shak').status_code, 404)
        self.assertEqual(self.client.put('/api/recipes/shak', json=body).status_code, 404)

    def test_recipe_validation(self):
        self.assertEqual(self.client.post('/api/recipes', json={"name": "   "}).status_code, 422)
        bad_category = recipe_body("Soup", category="candy")
        self.assertEqual(self.client.post('/api/recipes', json=bad_category).status_code, 422)
        resp = self.client.post('/api/recipes', json={
            "name": "  Toast ", "ingredients": [{"name": " "}, {"name": "Bread", "quantity": 2}]
        })
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()['name'], "Toast")
        self.assertEqual([i['name'] for i in resp.json()['ingredients']], ["Bread"])

    def test_recipe_listing(self):
        self.client.post('/api/recipes', json=recipe_body("Lentil Soup", cost=3, category="dry", ingredient="Lentils"))
        self.client.post('/api/recipes', json=recipe_body("Beef Stew", cost=9, category="protein", ingredient="Beef"))
        resp = self.client.get('/api/recipes', params={"search": "lentil", "sort_key": "name", "sort_direction": "asc"})
        data = resp.json()
        self.assertEqual([r['name'] for r in data['items']], ["Lentil Soup"])
        self.assertEqual(data['total'], 2)

        resp = self.client.get('/api/recipes', params={"sort_key": "cost", "sort_direction": "desc"})
        self.assertEqual([r['name'] for r in resp.json()['items']], ["Beef Stew", "Lentil Soup"])

        resp = self.client.get('/api/recipes', params=[("categories", "protein")])
        self.assertEqual([r['name'] for r in resp.json()['items']], ["Beef Stew"])

        self.assertEqual(self.client.get('/api/recipes', params={"sort_key": "calories"}).status_code, 422)
        used = self.client.get('/api/recipes/categories').json()['used']
        self.assertEqual(used, ["dry", "produce", "protein"])

    def test_rules_conflict_and_toggles(self):
        resp = self.client.put('/api/rules', json={
            "servings": 3, "budget": 50, "variety": 4, "includeIds": ["a", "b"], "excludeIds": ["b"]
        })
        self.assertEqual(resp.status_code, 200)
        rules = resp.json()
        self.assertEqual(rules['includeIds'], ["a"])
        self.assertEqual(rules['excludeIds'], ["b"])

        rules = self.client.post('/api/rules/include/b').json()
        self.assertEqual(rules['includeIds'], ["a", "b"])
        self.assertEqual(rules['excludeIds'], [])
        rules = self.client.post('/api/rules/exclude/a').json()
        self.assertEqual(rules['includeIds'], ["b"])
        self.assertEqual(rules['excludeIds'], ["a"])

        self.assertEqual(self.client.put('/api/rules', json={"servings": 0, "budget": 1, "variety": 3}).status_code, 422)
        self.assertEqual(self.client.post('/api/rules/reset').json()['servings'], 2)

    def test_sample_weeks(self):
        ids = self._seed(7)
        self.assertEqual(self.client.post('/api/sample-weeks', json={"name": "Short", "recipeIds": ids[:3]}).status_code, 422)
        resp = self.client.post('/api/sample-weeks', json={"name": "Favourites", "recipeIds": ids})
        self.assertEqual(resp.status_code, 201)
        sample_id = resp.json()['id']

        # The fresh working week is empty and cannot be saved as a sample
        self.assertEqual(self.client.post('/api/sample-weeks/from-menu', json={"name": "Empty"}).status_code, 400)
        self.client.post('/api/menu/generate')
        self.assertEqual(self.client.post('/api/sample-weeks/from-menu', json={"name": "This week"}).status_code, 201)

        listing = self.client.get('/api/sample-weeks').json()
        self.assertEqual([s['name'] for s in listing['items']], ["This week", "Favourites"])
        self.assertEqual(self.client.delete(f'/api/sample-weeks/{sample_id}').status_code, 200)
        self.assertEqual(self.client.delete(f'/api/sample-weeks/{sample_id}').status_code, 404)

    def test_generate_week_and_history(self):
        self._seed(8)
        resp = self.client.post('/api/menu/generate')
        self.assertEqual(resp.status_code, 200)
        menu = resp.json()
        recipe_ids = [d['recipeId'] for d in menu['days']]
        self.assertEqual(len(set(recipe_ids)), 7)
        self.assertTrue(all(d['recipeName'] for d in menu['days']))
        self.assertEqual(menu['reveal_token'], self.scheduler.token)

        history = self.client.get('/api/history').json()
        self.assertEqual(history['count'], 1)
        self.assertEqual(history['items'][0]['id'], menu['id'])

        events = self.client.get('/api/menu/events').json()['events']
        revealed = [e['index'] for e in events if e['type'] == 'menu.day_revealed']
        self.assertEqual(revealed, list(range(7)))
        self.assertEqual(events[-1]['type'], 'menu.reveal_complete')

        shopping = self.client.get(f"/api/history/{menu['id']}/shopping-list").json()
        garlic = [i for i in shopping['items'] if i['name'] == 'Garlic'][0]
        self.assertAlmostEqual(garlic['quantity'], 28)
        self.assertEqual(self.client.get('/api/history/missing/shopping-list').status_code, 404)

        self.assertEqual(self.client.delete('/api/history').status_code, 200)
        self.assertEqual(self.client.get('/api/history').json()['count'], 0)

    def test_locked_day_survives_generation(self):
        ids = self._seed(8)
        self.client.put('/api/menu/days/4', json={"recipeId": ids[7]})
        self.client.post('/api/menu/days/4/lock')
        self.assertEqual(self.client.put('/api/menu/days/4', json={"recipeId": ids[0]}).status_code, 400)
        for _ in range(2):
            menu = self.client.post('/api/menu/generate').json()
            self.assertEqual(menu['days'][4]['recipeId'], ids[7])
            self.assertTrue(menu['days'][4]['locked'])
        self.assertEqual(self.client.get('/api/history').json()['count'], 2)

    def test_regenerate_single_day(self):
        ids = self._seed(8)
        self.client.post('/api/menu/generate')
        menu = self.client.post('/api/menu/days/0/regenerate').json()
        others = [d['recipeId'] for d in menu['days'][1:]]
        self.assertNotIn(menu['days'][0]['recipeId'], others)
        self.assertIn(menu['days'][0]['recipeId'], ids)

    def test_day_index_out_of_range(self):
        self.assertEqual(self.client.post('/api/menu/days/7/lock').status_code, 422)
        self.assertEqual(self.client.post('/api/menu/days/-1/regenerate').status_code, 422)

    def test_shopping_list_summary_and_pdf(self):
        self._seed(7)
        self.client.put('/api/rules', json={"servings": 2, "budget": 10, "variety": 5})
        self.client.post('/api/menu/generate')

        shopping = self.client.get('/api/menu/shopping-list').json()
        self.assertEqual(shopping['servings'], 2)
        garlic = [i for i in shopping['items'] if i['name'] == 'Garlic'][0]
        self.assertAlmostEqual(garlic['quantity'], 28)
        self.assertAlmostEqual(garlic['cost'], 1.4)
        categories = [i['category'] for i in shopping['items']]
        self.assertEqual(categories, sorted(categories))

        summary = self.client.get('/api/menu/summary').json()
        self.assertAlmostEqual(summary['total'], shopping['total_cost'])
        self.assertTrue(summary['over_budget'])
        self.assertEqual(summary['unassigned'], 0)

        resp = self.client.get('/api/menu/export_pdf')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['content-type'], 'application/pdf')
        self.assertTrue(resp.content.startswith(b'%PDF'))

    def test_new_week_clears_assignments(self):
        self._seed(7)
        self.client.post('/api/menu/generate')
        menu = self.client.post('/api/menu/new').json()
        self.assertTrue(all(d['recipeId'] is None for d in menu['days']))
        self.assertEqual(len(menu['days']), 7)
