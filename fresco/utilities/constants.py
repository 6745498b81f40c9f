from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
DAYS_BEFORE_EXPIRY: Final[int] = 5
# Computed needs at or below this are treated as already covered.
NEED_EPSILON: Final[float] = 0.005
# Share of a recipe's ingredients in stock for it to count as cookable.
COOKABLE_RATIO: Final[float] = 0.8
# Step used by the +/- shopping-list controls, keyed by unit.
ADJUST_STEPS: Final[dict[str, float]] = {"g": 100, "ml": 100, "kg": 0.1, "l": 0.1}
DEFAULT_ADJUST_STEP: Final[float] = 1
EXPIRY_DAYS_BY_CATEGORY: Final[dict[str, int]] = {
    "vegetables": 7,
    "fruits": 7,
    "dairy": 14,
    "meat": 3,
    "fish": 2,
    "grains": 180,
    "pantry": 90,
    "spices": 365,
    "other": 30,
}
DEFAULT_EXPIRY_DAYS: Final[int] = 14
