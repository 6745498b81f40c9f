"""Recipe domain entity: name, servings, ingredients."""
import logging
from typing import Dict, List, Optional
from fresco.domain.Ingredient import Ingredient
from fresco.domain.Pantry import Pantry
from fresco.logic.recipes.scaling import scale_ingredients

logger = logging.getLogger(__name__)


class Recipe:
    def __init__(self, name: str = "", servings: int = 1, ingredients: Optional[List[Ingredient]] = None):
        self.name = name
        self.servings = servings
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            name=d.get('name', ''),
            servings=d.get('servings', 1),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get('ingredients', [])],
        )

    def to_dict(self):
        return {
            "name": self.name,
            "servings": self.servings,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }

    def cook(self, pantry: Pantry, servings: Optional[float] = None) -> List[Dict]:
        """Consume the scaled ingredients from the pantry.

        Ingredients the pantry does not stock are skipped. Returns what was
        actually taken as dicts { name, quantity, unit }.
        """
        used = []
        for ing in scale_ingredients(self, servings if servings is not None else self.servings):
            if pantry.find(ing.name) is None:
                logger.debug(f"{self.name}: {ing.name} not in pantry, skipped")
                continue
            pantry.consume(ing.name, ing.quantity, ing.unit)
            used.append({"name": ing.name, "quantity": ing.quantity, "unit": ing.unit})
        logger.info(f"Cooked {self.name}: {len(used)} ingredients taken from pantry")
        return used
