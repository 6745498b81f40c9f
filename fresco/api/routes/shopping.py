"""Shopping list and recipe availability endpoints."""
from fastapi import APIRouter

from fresco.domain.Ingredient import Ingredient
from fresco.domain.Plan import Plan
from fresco.domain.Recipe import Recipe
from fresco.domain.ShoppingList import ShoppingItem
from fresco.logic.recipes.scaling import missing_ingredients, recipe_availability
from fresco.logic.shopping.list_builder import build_shopping_list
from fresco.utilities.validators import AvailabilityRequest, MissingIngredientsRequest, ShoppingListRequest

router = APIRouter(prefix="/api")


def _recipe(data) -> Recipe:
    return Recipe.from_dict(data.model_dump())


def _pantry(items):
    return [Ingredient.from_dict(i.model_dump()) for i in items]


@router.post("/shopping-list")
def api_shopping_list(body: ShoppingListRequest):
    plan = Plan.from_list([s.model_dump() for s in body.plan])
    items = build_shopping_list(
        plan,
        [_recipe(r) for r in body.recipes],
        _pantry(body.pantry),
        [ShoppingItem.from_dict(i.model_dump()) for i in body.existing],
    )
    return {"count": len(items), "items": [i.to_dict() for i in items]}


@router.post("/recipes/missing")
def api_missing_ingredients(body: MissingIngredientsRequest):
    items = missing_ingredients(_recipe(body.recipe), body.servings, _pantry(body.pantry))
    return {"count": len(items), "items": items}


@router.post("/recipes/availability")
def api_recipe_availability(body: AvailabilityRequest):
    return recipe_availability(_recipe(body.recipe), _pantry(body.pantry))
