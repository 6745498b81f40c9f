"""ShoppingItem entity: one line of the shopping list."""
from typing import Optional


class ShoppingItem:
    def __init__(self, name: str = "", quantity: float = 0, unit: str = "",
                 category: Optional[str] = None, is_purchased: bool = False):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.is_purchased = is_purchased

    def __str__(self) -> str:
        mark = "x" if self.is_purchased else " "
        return f"[{mark}] {self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingItem(
            name=d.get("name", ""),
            quantity=float(d.get("quantity") or 0),
            unit=d.get("unit", ""),
            category=d.get("category"),
            is_purchased=bool(d.get("is_purchased", False)),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "is_purchased": self.is_purchased,
        }
