"""Pantry aggregate: collection of Ingredient stock, consumed and replenished through the unit engine."""
import logging
from datetime import date, timedelta
from typing import List, Optional
from fresco.domain.Ingredient import Ingredient
from fresco.events.Event_Bus import (
    GLOBAL_EVENT_BUS, PANTRY_DEPLETED, PANTRY_LOW_STOCK, PANTRY_NEAR_EXPIRY, PANTRY_REPLENISHED,
    DepletedPayload, LowStockPayload, NearExpiryPayload, ReplenishedPayload
)
from fresco.logic.units.engine import (
    Dimension, add, auto_scale, clean_name, normalize, subtract
)
from fresco.utilities.config import LOW_STOCK_THRESHOLD
from fresco.utilities.constants import DAYS_BEFORE_EXPIRY, DEFAULT_EXPIRY_DAYS, EXPIRY_DAYS_BY_CATEGORY

logger = logging.getLogger(__name__)

_THRESHOLD_KEY = {Dimension.MASS: "g", Dimension.VOLUME: "ml", Dimension.COUNT: "uds"}


class Pantry:
    def __init__(self):
        self.items: List[Ingredient] = []
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def add_item(self, item: Ingredient):
        '''
        Adds an item to the pantry.
        '''
        self.items.append(item)
        self._evaluate_item(item)

    def remove_item(self, item: Ingredient):
        '''
        Removes an item from the pantry.
        '''
        self.items.remove(item)

    def get_items(self):
        return self.items

    def find(self, name: str) -> Optional[Ingredient]:
        '''
        Returns the first item whose cleaned name matches, or None.
        '''
        key = clean_name(name)
        for item in self.items:
            if clean_name(item.name) == key:
                return item
        return None

    # --- Stock changes -----------------------------------------------------
    def consume(self, name: str, quantity: float, unit: str) -> Ingredient:
        '''
        Takes quantity/unit out of the matching item. Units the engine cannot
        reconcile are subtracted naively in the item's own unit.
        '''
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        item = self.find(name)
        if item is None:
            raise ValueError(f"Ingredient '{name}' not found in pantry.")

        result = subtract(item.quantity, item.unit, quantity, unit)
        if result is None:
            logger.info(f"Cannot reconcile {unit!r} with {item.unit!r} for {item.name}; subtracting naively")
            result = auto_scale(max(0, item.quantity - quantity), item.unit)
        item.set_quantity(result.quantity, result.unit)
        self._evaluate_item(item)
        return item

    def replenish(self, name: str, quantity: float, unit: str,
                  category: Optional[str] = None, expires_at: Optional[date] = None) -> Ingredient:
        '''
        Adds quantity/unit to the matching item, or stocks a new one.
        '''
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        item = self.find(name)
        if item is None:
            scaled = auto_scale(quantity, unit)
            if expires_at is None:
                days = EXPIRY_DAYS_BY_CATEGORY.get(category or "", DEFAULT_EXPIRY_DAYS)
                expires_at = date.today() + timedelta(days=days)
            item = Ingredient(name, scaled.quantity, scaled.unit, category, expires_at)
            self.items.append(item)
            logger.debug(f"New pantry item {item}")
        else:
            result = add(item.quantity, item.unit, quantity, unit)
            item.set_quantity(result.quantity, result.unit)
        self._evaluate_item(item)
        self._event_bus.publish(PANTRY_REPLENISHED, ReplenishedPayload(
            ingredient=item, added=quantity, unit=unit,
        ))
        return item

    # --- Evaluation logic --------------------------------------------------
    def _evaluate_item(self, item: Ingredient):
        canonical = normalize(item.quantity, item.unit)
        if canonical.value <= 0:
            self._event_bus.publish(PANTRY_DEPLETED, DepletedPayload(ingredient=item))
        else:
            threshold = LOW_STOCK_THRESHOLD.get(_THRESHOLD_KEY[canonical.dimension], 0)
            if canonical.value <= threshold:
                self._event_bus.publish(PANTRY_LOW_STOCK, LowStockPayload(
                    ingredient=item, remaining=canonical.value, threshold=threshold,
                ))
        if item.expires_at:
            days_left = (item.expires_at - date.today()).days
            if days_left <= DAYS_BEFORE_EXPIRY:
                self._event_bus.publish(PANTRY_NEAR_EXPIRY, NearExpiryPayload(
                    ingredient=item, days_left=days_left, threshold=DAYS_BEFORE_EXPIRY,
                ))

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        '''
        Populates the Pantry object from a list of dictionaries.
        '''
        for item_data in data:
            self.add_item(Ingredient.from_dict(item_data))
        return self

    def to_dict(self):
        return [item.to_dict() for item in self.items]
