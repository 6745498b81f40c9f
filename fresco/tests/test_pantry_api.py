from datetime import date, timedelta
import unittest
from fastapi.testclient import TestClient
from fresco.api.api_run import app
from fresco.utilities.constants import DATE_FORMAT


class TestPantryAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_consume_across_units(self):
        resp = self.client.post('/api/pantry/consume', json={
            "pantry": [{"name": "Arroz", "quantity": 1.5, "unit": "kg"}],
            "name": "arroz", "quantity": 900, "unit": "g",
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual((data["item"]["quantity"], data["item"]["unit"]), (600, "g"))
        self.assertEqual(data["pantry"][0]["unit"], "g")
        self.assertEqual(data["events"], [])

    def test_consume_to_zero_reports_depleted(self):
        resp = self.client.post('/api/pantry/consume', json={
            "pantry": [{"name": "Sal", "quantity": 100, "unit": "g"}],
            "name": "Sal", "quantity": 100, "unit": "g",
        })
        self.assertEqual(resp.json()["events"], [{"event": "pantry.depleted", "name": "Sal"}])

    def test_consume_unknown_item_is_404(self):
        resp = self.client.post('/api/pantry/consume', json={
            "pantry": [{"name": "Arroz", "quantity": 1, "unit": "kg"}],
            "name": "Pimienta", "quantity": 1, "unit": "g",
        })
        self.assertEqual(resp.status_code, 404)

    def test_negative_quantity_rejected(self):
        resp = self.client.post('/api/pantry/consume', json={
            "pantry": [{"name": "Arroz", "quantity": 1, "unit": "kg"}],
            "name": "Arroz", "quantity": -1, "unit": "g",
        })
        self.assertEqual(resp.status_code, 422)

    def test_replenish_new_short_lived_item(self):
        resp = self.client.post('/api/pantry/replenish', json={
            "name": "Merluza", "quantity": 500, "unit": "g", "category": "fish",
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        expected_expiry = (date.today() + timedelta(days=2)).strftime(DATE_FORMAT)
        self.assertEqual(data["item"]["expires_at"], expected_expiry)
        self.assertEqual([e["event"] for e in data["events"]], ["pantry.near_expiry", "pantry.replenished"])

    def test_replenish_keeps_given_expiry(self):
        resp = self.client.post('/api/pantry/replenish', json={
            "pantry": [{"name": "Arroz", "quantity": 1, "unit": "kg"}],
            "name": "Aceite", "quantity": 1, "unit": "l", "expires_at": "01-02-2030",
        })
        data = resp.json()
        self.assertEqual(data["item"]["expires_at"], "01-02-2030")
        self.assertEqual([i["name"] for i in data["pantry"]], ["Arroz", "Aceite"])

    def test_finish_shopping(self):
        resp = self.client.post('/api/shopping-list/finish', json={
            "pantry": [{"name": "Leche", "quantity": 500, "unit": "ml"}],
            "items": [
                {"name": "Leche", "quantity": 1, "unit": "l", "is_purchased": True},
                {"name": "Pan", "quantity": 1, "unit": "uds"},
            ],
        })
        data = resp.json()
        self.assertEqual(data["stocked"], ["Leche"])
        self.assertEqual(len(data["pantry"]), 1)
        self.assertEqual((data["pantry"][0]["quantity"], data["pantry"][0]["unit"]), (1.5, "l"))

    def test_recipe_availability(self):
        resp = self.client.post('/api/recipes/availability', json={
            "recipe": {"name": "Arroz con tomate", "servings": 2, "ingredients": [
                {"name": "Arroz", "quantity": 300, "unit": "g"},
                {"name": "Tomate", "quantity": 2, "unit": "uds"},
            ]},
            "pantry": [{"name": "Arroz", "quantity": 1, "unit": "kg"}],
        })
        self.assertEqual(resp.json(), {"available": 1, "total": 2, "percentage": 0.5, "cookable": False})


if __name__ == '__main__':
    unittest.main()
