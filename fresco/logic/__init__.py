"""Core business logic layer.

Subpackages:
- units: unit reconciliation engine (normalize, convert, subtract/add, scale, format)
- recipes: scaling recipes by servings and checking pantry availability
- shopping: building shopping lists from a meal plan
"""
__all__ = ["units", "recipes", "shopping"]
