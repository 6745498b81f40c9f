"""Pantry stock endpoints: consume, replenish and finish shopping.

Stock travels in the request body and the updated pantry comes back in the
response, together with the stock events raised while applying the change.
"""
import logging
from fastapi import APIRouter, HTTPException

from fresco.domain.Ingredient import Ingredient
from fresco.domain.Pantry import Pantry
from fresco.domain.ShoppingList import ShoppingItem
from fresco.events.Event_Bus import EventBus, STOCK_EVENTS
from fresco.logic.shopping.list_builder import finish_shopping
from fresco.utilities.validators import FinishShoppingRequest, StockRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _load_pantry(items):
    events = []
    bus = EventBus()
    pantry = Pantry().set_event_bus(bus)
    # stock loaded from the request is not news to the caller
    pantry.from_dict([i.model_dump() for i in items])
    bus.subscribe_many(STOCK_EVENTS, lambda evt, payload: events.append(
        {"event": evt, "name": payload["ingredient"].name}
    ))
    return pantry, events


def _response(pantry: Pantry, events, **extra):
    return {**extra, "pantry": pantry.to_dict(), "events": events}


@router.post("/pantry/consume")
def api_consume(body: StockRequest):
    pantry, events = _load_pantry(body.pantry)
    if pantry.find(body.name) is None:
        raise HTTPException(status_code=404, detail='Ingredient not found')
    try:
        item = pantry.consume(body.name, body.quantity, body.unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Consumed {body.quantity} {body.unit} of {item.name}")
    return _response(pantry, events, item=item.to_dict())


@router.post("/pantry/replenish")
def api_replenish(body: StockRequest):
    pantry, events = _load_pantry(body.pantry)
    expires_at = Ingredient.from_dict(body.model_dump()).expires_at
    try:
        item = pantry.replenish(body.name, body.quantity, body.unit, body.category, expires_at)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Replenished {item.name} with {body.quantity} {body.unit}")
    return _response(pantry, events, item=item.to_dict())


@router.post("/shopping-list/finish")
def api_finish_shopping(body: FinishShoppingRequest):
    pantry, events = _load_pantry(body.pantry)
    items = [ShoppingItem.from_dict(i.model_dump()) for i in body.items]
    try:
        stocked = finish_shopping(pantry, items)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _response(pantry, events, stocked=stocked)
