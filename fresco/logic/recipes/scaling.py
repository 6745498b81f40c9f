"""Recipe scaling and pantry availability.

Provides scale_ingredients(recipe, servings),
missing_ingredients(recipe, servings, pantry_items) and
recipe_availability(recipe, pantry_items).
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from fresco.domain.Ingredient import Ingredient
from fresco.logic.units.engine import auto_scale, clean_name, subtract
from fresco.utilities.constants import COOKABLE_RATIO, NEED_EPSILON

__all__ = ["scale_factor", "scale_ingredients", "missing_ingredients", "recipe_availability"]


def scale_factor(recipe_servings: float, servings: float) -> float:
    base = recipe_servings if recipe_servings and recipe_servings > 0 else 1
    return servings / base


def scale_ingredients(recipe, servings: float) -> List[Ingredient]:
    """Return copies of the recipe's ingredients sized for `servings` people."""
    factor = scale_factor(recipe.servings, servings)
    return [
        Ingredient(ing.name, ing.quantity * factor, ing.unit, ing.category)
        for ing in recipe.ingredients
    ]


def _find_stock(name: str, pantry_items: List[Ingredient]) -> Optional[Ingredient]:
    key = clean_name(name)
    for item in pantry_items:
        if clean_name(item.name) == key:
            return item
    return None


def missing_ingredients(recipe, servings: float, pantry_items: List[Ingredient]) -> List[Dict[str, Any]]:
    """What is still needed to cook `recipe` for `servings` people.

    Returns dicts { name, quantity, unit, have } in recipe order, only for
    ingredients whose stock does not cover the requirement.
    """
    result: List[Dict[str, Any]] = []
    for ing in scale_ingredients(recipe, servings):
        stock = _find_stock(ing.name, pantry_items)
        if stock is None:
            missing_qty, missing_unit = ing.quantity, ing.unit
            have = 0
        else:
            have = stock.quantity
            remaining = subtract(ing.quantity, ing.unit, stock.quantity, stock.unit)
            if remaining is None:
                missing_qty, missing_unit = max(0, ing.quantity - stock.quantity), ing.unit
            else:
                missing_qty, missing_unit = remaining
        if missing_qty <= NEED_EPSILON:
            continue
        scaled = auto_scale(missing_qty, missing_unit)
        result.append({
            'name': ing.name,
            'quantity': scaled.quantity,
            'unit': scaled.unit,
            'have': have,
        })
    return result


def _in_stock(name: str, pantry_items: List[Ingredient]) -> bool:
    key = clean_name(name)
    if not key:
        return False
    for item in pantry_items:
        if item.quantity <= 0:
            continue
        stocked = clean_name(item.name)
        # "arroz" matches "arroz basmati" and the other way round
        if stocked and (key in stocked or stocked in key):
            return True
    return False


def recipe_availability(recipe, pantry_items: List[Ingredient]) -> Dict[str, Any]:
    """How much of `recipe` the pantry covers, ignoring quantities.

    Returns { available, total, percentage, cookable } where percentage is
    available / total (0 for a recipe with no ingredients) and cookable is
    true from COOKABLE_RATIO upwards.
    """
    total = len(recipe.ingredients)
    available = sum(1 for ing in recipe.ingredients if _in_stock(ing.name, pantry_items))
    percentage = available / total if total else 0
    return {
        'available': available,
        'total': total,
        'percentage': percentage,
        'cookable': total > 0 and percentage >= COOKABLE_RATIO,
    }
