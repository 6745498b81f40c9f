from datetime import date, timedelta
import unittest
from fresco.domain.Ingredient import Ingredient
from fresco.domain.Pantry import Pantry
from fresco.events.Event_Bus import (
    EventBus, PANTRY_DEPLETED, PANTRY_LOW_STOCK, PANTRY_NEAR_EXPIRY, PANTRY_REPLENISHED, STOCK_EVENTS
)


class TestPantry(unittest.TestCase):

    def setUp(self):
        self.events = []
        bus = EventBus()
        bus.subscribe_many(STOCK_EVENTS, lambda evt, payload: self.events.append((evt, payload)))
        self.pantry = Pantry().set_event_bus(bus)

    def _event_names(self):
        return [evt for evt, _ in self.events]

    def test_add_and_remove_item(self):
        ingredient = Ingredient("Azúcar", 1, "kg")
        self.pantry.add_item(ingredient)
        self.assertIn(ingredient, self.pantry.get_items())
        self.pantry.remove_item(ingredient)
        self.assertNotIn(ingredient, self.pantry.get_items())

    def test_find_uses_clean_name(self):
        tomatoes = Ingredient("Tomates (pera)", 6, "uds")
        self.pantry.add_item(tomatoes)
        self.assertIs(self.pantry.find("tomate"), tomatoes)
        self.assertIsNone(self.pantry.find("pepino"))

    def test_consume_across_units(self):
        self.pantry.add_item(Ingredient("Arroz", 1.5, "kg"))
        item = self.pantry.consume("arroz", 900, "g")
        self.assertEqual((item.quantity, item.unit), (600, "g"))

    def test_consume_incompatible_units_falls_back_to_naive(self):
        self.pantry.add_item(Ingredient("Huevos", 6, "uds"))
        item = self.pantry.consume("huevo", 2, "kg")
        self.assertEqual((item.quantity, item.unit), (4, "uds"))

    def test_consume_to_zero_publishes_depleted(self):
        self.pantry.add_item(Ingredient("Leche", 500, "ml"))
        item = self.pantry.consume("Leche", 1, "l")
        self.assertEqual(item.quantity, 0)
        self.assertIn(PANTRY_DEPLETED, self._event_names())

    def test_consume_publishes_low_stock(self):
        self.pantry.add_item(Ingredient("Harina", 1, "kg"))
        self.pantry.consume("harina", 850, "g")
        low = [payload for evt, payload in self.events if evt == PANTRY_LOW_STOCK]
        self.assertEqual(len(low), 1)
        self.assertEqual(low[0]["remaining"], 150)

    def test_consume_rejects_bad_input(self):
        self.pantry.add_item(Ingredient("Sal", 500, "g"))
        with self.assertRaises(ValueError):
            self.pantry.consume("sal", -1, "g")
        with self.assertRaises(ValueError):
            self.pantry.consume("pimienta", 1, "g")

    def test_replenish_existing_item(self):
        self.pantry.add_item(Ingredient("Leche", 500, "ml"))
        item = self.pantry.replenish("leche", 1, "l")
        self.assertEqual((item.quantity, item.unit), (1.5, "l"))
        self.assertIn(PANTRY_REPLENISHED, self._event_names())

    def test_replenish_new_item_gets_category_expiry(self):
        item = self.pantry.replenish("Tomates", 2000, "g", category="vegetables")
        self.assertEqual((item.quantity, item.unit), (2, "kg"))
        self.assertEqual(item.expires_at, date.today() + timedelta(days=7))
        self.assertIn(item, self.pantry.get_items())

    def test_replenish_short_lived_item_publishes_near_expiry(self):
        self.pantry.replenish("Merluza", 500, "g", category="fish")
        expiring = [payload for evt, payload in self.events if evt == PANTRY_NEAR_EXPIRY]
        self.assertEqual(len(expiring), 1)
        self.assertEqual(expiring[0]["days_left"], 2)
        self.assertEqual(expiring[0]["ingredient"].name, "Merluza")

    def test_replenish_existing_expiring_item_publishes_near_expiry(self):
        self.pantry.items.append(Ingredient("Nata", 200, "ml", "dairy", date.today() + timedelta(days=3)))
        self.pantry.replenish("nata", 200, "ml")
        self.assertEqual(self._event_names(), [PANTRY_NEAR_EXPIRY, PANTRY_REPLENISHED])

    def test_replenish_still_low_publishes_low_stock(self):
        self.pantry.items.append(Ingredient("Sal", 50, "g"))
        self.pantry.replenish("sal", 100, "g")
        self.assertEqual(self._event_names(), [PANTRY_LOW_STOCK, PANTRY_REPLENISHED])

    def test_near_expiry_event(self):
        self.pantry.add_item(Ingredient("Yogur", 4, "uds", "dairy", date.today() + timedelta(days=1)))
        expiring = [payload for evt, payload in self.events if evt == PANTRY_NEAR_EXPIRY]
        self.assertEqual(expiring[0]["days_left"], 1)

    def test_dict_round_trip(self):
        data = [{"name": "Aceite", "quantity": 1, "unit": "l", "category": "pantry", "expires_at": "01-02-2030"}]
        self.pantry.from_dict(data)
        item = self.pantry.get_items()[0]
        self.assertEqual(item.expires_at, date(2030, 2, 1))
        self.assertEqual(self.pantry.to_dict(), [{
            "name": "Aceite", "quantity": 1.0, "unit": "l", "category": "pantry", "expires_at": "01-02-2030"
        }])


if __name__ == '__main__':
    unittest.main()
