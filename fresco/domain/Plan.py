"""Plan domain entities: a meal plan is a list of slots, each one a recipe cooked for N people."""
from typing import List


class MealSlot:
    def __init__(self, recipe_name: str, servings: float = 1, day: str = ""):
        self.recipe_name = recipe_name
        self.servings = servings
        self.day = day

    @staticmethod
    def from_dict(data):
        return MealSlot(
            recipe_name=data.get("recipe_name", ""),
            servings=data.get("servings", 1),
            day=data.get("day", ""),
        )

    def __repr__(self) -> str:
        return f"MealSlot({self.recipe_name!r}, servings={self.servings})"


class Plan:
    def __init__(self, slots: List[MealSlot] = None):
        self.slots = slots[:] if slots else []

    @staticmethod
    def from_list(data):
        return Plan([MealSlot.from_dict(s) for s in data or []])
