"""Publish/subscribe bus for pantry stock events.

Each event name has a TypedDict describing its payload, so subscribers can
read ``payload["remaining"]`` and type checkers know what is there:

  pantry.low_stock   -> LowStockPayload
  pantry.depleted    -> DepletedPayload
  pantry.replenished -> ReplenishedPayload
  pantry.near_expiry -> NearExpiryPayload

Subscribers are callables taking (event_name, payload). A subscriber that
raises is logged and skipped; the remaining subscribers still run.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, TypedDict

if TYPE_CHECKING:
    from fresco.domain.Ingredient import Ingredient

logger = logging.getLogger(__name__)

PANTRY_LOW_STOCK = "pantry.low_stock"
PANTRY_DEPLETED = "pantry.depleted"
PANTRY_REPLENISHED = "pantry.replenished"
PANTRY_NEAR_EXPIRY = "pantry.near_expiry"

STOCK_EVENTS = (PANTRY_LOW_STOCK, PANTRY_DEPLETED, PANTRY_REPLENISHED, PANTRY_NEAR_EXPIRY)


class DepletedPayload(TypedDict):
    ingredient: "Ingredient"


class LowStockPayload(TypedDict):
    ingredient: "Ingredient"
    remaining: float    # canonical value (g, ml or uds)
    threshold: float


class ReplenishedPayload(TypedDict):
    ingredient: "Ingredient"
    added: float
    unit: str


class NearExpiryPayload(TypedDict):
    ingredient: "Ingredient"
    days_left: int
    threshold: int


Subscriber = Callable[[str, Any], None]


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Subscriber) -> Subscriber:
        if callback not in self._subscribers[event_name]:
            self._subscribers[event_name].append(callback)
        return callback

    def subscribe_many(self, event_names: Iterable[str], callback: Subscriber) -> Subscriber:
        '''Registers one callback for several events, e.g. all of STOCK_EVENTS.'''
        for name in event_names:
            self.subscribe(name, callback)
        return callback

    def unsubscribe(self, event_name: str, callback: Subscriber):
        subscribers = self._subscribers.get(event_name)
        if subscribers and callback in subscribers:
            subscribers.remove(callback)

    def subscribers(self, event_name: str) -> List[Subscriber]:
        return list(self._subscribers.get(event_name, []))

    def publish(self, event_name: str, payload: Any) -> int:
        '''Delivers payload to every subscriber of event_name. Returns how many succeeded.'''
        delivered = 0
        for cb in self.subscribers(event_name):
            try:
                cb(event_name, payload)
            except Exception as e:
                logger.error(f"Error delivering {event_name} to {cb}: {e}")
                continue
            delivered += 1
        logger.debug(f"{event_name} delivered to {delivered} subscriber(s)")
        return delivered


GLOBAL_EVENT_BUS = EventBus()


__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS', 'STOCK_EVENTS',
    'PANTRY_LOW_STOCK', 'PANTRY_DEPLETED', 'PANTRY_REPLENISHED', 'PANTRY_NEAR_EXPIRY',
    'DepletedPayload', 'LowStockPayload', 'ReplenishedPayload', 'NearExpiryPayload',
]
