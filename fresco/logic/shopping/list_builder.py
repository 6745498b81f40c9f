"""Shopping list builder.

Provides build_shopping_list(plan, recipes, pantry_items, existing_items=())
plus the helpers behind the list's quantity controls: adjust_quantity,
apply_edit and finish_shopping.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List
from fresco.domain.Ingredient import Ingredient
from fresco.domain.Pantry import Pantry
from fresco.domain.Plan import Plan
from fresco.domain.ShoppingList import ShoppingItem
from fresco.logic.recipes.scaling import scale_factor
from fresco.logic.units.engine import (
    DisplayQuantity, add, auto_scale, clean_name, parse_locale_number, subtract
)
from fresco.utilities.constants import ADJUST_STEPS, DEFAULT_ADJUST_STEP, NEED_EPSILON

logger = logging.getLogger(__name__)


def _accumulate(current: ShoppingItem, quantity: float, unit: str):
    # identical labels are summed as-is so free-text units ("diente") survive
    if current.unit.strip().lower() == (unit or '').strip().lower():
        current.quantity += quantity
        return
    total = add(current.quantity, current.unit, quantity, unit)
    current.quantity, current.unit = total.quantity, total.unit


def build_shopping_list(plan: Plan, recipes: Iterable, pantry_items: Iterable[Ingredient],
                        existing_items: Iterable[ShoppingItem] = ()) -> List[ShoppingItem]:
    """Compute what to buy for a meal plan.

    Args:
        plan: Plan whose slots name a recipe and the servings to cook.
        recipes: Recipe objects available to the plan.
        pantry_items: current pantry stock.
        existing_items: items already on the stored list; they are kept
            first and their names are not recomputed.

    Returns:
        existing_items followed by the computed ShoppingItem entries.
    """
    recipe_index = {clean_name(r.name): r for r in recipes}
    needs: Dict[str, ShoppingItem] = {}

    for slot in plan.slots:
        recipe = recipe_index.get(clean_name(slot.recipe_name))
        if recipe is None:
            logger.warning(f"Plan references unknown recipe {slot.recipe_name!r}")
            continue
        factor = scale_factor(recipe.servings, slot.servings)
        for ing in recipe.ingredients:
            key = clean_name(ing.name)
            qty = ing.quantity * factor
            if key in needs:
                _accumulate(needs[key], qty, ing.unit)
            else:
                needs[key] = ShoppingItem(ing.name, qty, ing.unit, ing.category)

    stock = {}
    for p in pantry_items:
        stock.setdefault(clean_name(p.name), p)

    for key, need in needs.items():
        in_pantry = stock.get(key)
        if in_pantry is None:
            continue
        result = subtract(need.quantity, need.unit, in_pantry.quantity, in_pantry.unit)
        if result is None:
            need.quantity = max(0, need.quantity - in_pantry.quantity)
        else:
            need.quantity, need.unit = result

    existing = list(existing_items)
    existing_keys = {clean_name(i.name) for i in existing}
    final_items: List[ShoppingItem] = existing[:]
    for key, need in needs.items():
        if need.quantity <= NEED_EPSILON or key in existing_keys:
            continue
        need.quantity, need.unit = auto_scale(need.quantity, need.unit)
        final_items.append(need)

    logger.debug(f"Shopping list: {len(final_items) - len(existing)} computed, {len(existing)} stored")
    return final_items


def adjust_quantity(quantity: float, unit: str, direction: int) -> DisplayQuantity:
    """One press of the +/- control: 100 g/ml, 0.1 kg/l or 1 of anything else."""
    step = ADJUST_STEPS.get((unit or '').lower(), DEFAULT_ADJUST_STEP)
    raw = max(0, quantity + step * direction)
    return auto_scale(raw, unit)


def apply_edit(text: str, unit: str) -> DisplayQuantity:
    """Quantity typed by the user (comma or dot decimals), rescaled."""
    return auto_scale(parse_locale_number(text), unit)


def finish_shopping(pantry: Pantry, items: Iterable[ShoppingItem]) -> List[str]:
    """Move every purchased item into the pantry. Returns the names stocked."""
    stocked = []
    for item in items:
        if not item.is_purchased:
            continue
        pantry.replenish(item.name, item.quantity, item.unit, item.category)
        stocked.append(item.name)
    logger.info(f"Shopping finished: {len(stocked)} items moved to pantry")
    return stocked


__all__ = ['build_shopping_list', 'adjust_quantity', 'apply_edit', 'finish_shopping']
