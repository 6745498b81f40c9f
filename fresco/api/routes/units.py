"""Unit engine endpoints: thin JSON wrappers over fresco.logic.units.engine."""
from fastapi import APIRouter

from fresco.logic.units.engine import (
    CanonicalValue, add, auto_scale, clean_name, format_quantity,
    normalize, parse_locale_number, subtract, to_display
)
from fresco.utilities.validators import CanonicalInput, QuantityInput, StockChangeInput, TextInput

router = APIRouter(prefix="/api")


@router.post("/units/normalize")
def api_normalize(body: QuantityInput):
    value, dimension = normalize(body.quantity, body.unit)
    return {"value": value, "dimension": dimension.value}


@router.post("/units/display")
def api_display(body: CanonicalInput):
    quantity, unit = to_display(CanonicalValue(body.value, body.dimension))
    return {"quantity": quantity, "unit": unit}


@router.post("/units/scale")
def api_scale(body: QuantityInput):
    quantity, unit = auto_scale(body.quantity, body.unit)
    return {"quantity": quantity, "unit": unit}


@router.post("/units/subtract")
def api_subtract(body: StockChangeInput):
    result = subtract(body.source.quantity, body.source.unit, body.delta.quantity, body.delta.unit)
    if result is None:
        return {"computable": False, "quantity": None, "unit": None}
    return {"computable": True, "quantity": result.quantity, "unit": result.unit}


@router.post("/units/add")
def api_add(body: StockChangeInput):
    quantity, unit = add(body.source.quantity, body.source.unit, body.delta.quantity, body.delta.unit)
    return {"quantity": quantity, "unit": unit}


@router.post("/units/format")
def api_format(body: QuantityInput):
    return {"text": format_quantity(body.quantity, body.unit)}


@router.post("/units/parse")
def api_parse(body: TextInput):
    return {"value": parse_locale_number(body.text)}


@router.post("/names/clean")
def api_clean_name(body: TextInput):
    return {"key": clean_name(body.text)}
