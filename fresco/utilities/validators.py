"""
Input validation schemas using Pydantic for the JSON API.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from fresco.logic.units.engine import Dimension


class QuantityInput(BaseModel):
    """A (quantity, unit) pair as typed by the user or read from a recipe."""
    quantity: float = Field(..., ge=0)
    unit: str = Field("", max_length=30)

    @field_validator('unit')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class CanonicalInput(BaseModel):
    value: float = Field(..., ge=0)
    dimension: Dimension


class StockChangeInput(BaseModel):
    """Current stock plus the amount used or added, each in its own unit."""
    source: QuantityInput
    delta: QuantityInput


class TextInput(BaseModel):
    text: str = Field("", max_length=200)


class IngredientInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    unit: str = Field("", max_length=30)
    category: Optional[str] = None
    # DATE_FORMAT text, as produced by Ingredient.to_dict
    expires_at: Optional[str] = None

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class RecipeInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    servings: float = Field(1, gt=0)
    ingredients: List[IngredientInput] = Field(default_factory=list)


class MealSlotInput(BaseModel):
    recipe_name: str = Field(..., min_length=1)
    servings: float = Field(1, gt=0)
    day: str = ""


class ShoppingItemInput(IngredientInput):
    is_purchased: bool = False


class ShoppingListRequest(BaseModel):
    plan: List[MealSlotInput] = Field(default_factory=list)
    recipes: List[RecipeInput] = Field(default_factory=list)
    pantry: List[IngredientInput] = Field(default_factory=list)
    existing: List[ShoppingItemInput] = Field(default_factory=list)


class MissingIngredientsRequest(BaseModel):
    recipe: RecipeInput
    servings: float = Field(..., gt=0)
    pantry: List[IngredientInput] = Field(default_factory=list)


class AvailabilityRequest(BaseModel):
    recipe: RecipeInput
    pantry: List[IngredientInput] = Field(default_factory=list)


class StockRequest(IngredientInput):
    """A consume or replenish of one pantry item, applied to the given stock."""
    pantry: List[IngredientInput] = Field(default_factory=list)


class FinishShoppingRequest(BaseModel):
    pantry: List[IngredientInput] = Field(default_factory=list)
    items: List[ShoppingItemInput] = Field(default_factory=list)
