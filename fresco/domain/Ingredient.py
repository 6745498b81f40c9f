"""Ingredient domain entity: name, quantity, unit, optional category and expiration date."""
from datetime import date, datetime
from typing import Optional
from fresco.utilities.constants import DATE_FORMAT


class Ingredient:
    def __init__(self, name: str = "", quantity: float = 0, unit: str = "",
                 category: Optional[str] = None, expires_at: Optional[date] = None):
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.expires_at = expires_at

    def set_quantity(self, quantity: float, unit: Optional[str] = None):
        '''Replaces the stored amount (and unit, when given) with an engine result.'''
        self.quantity = quantity
        if unit is not None:
            self.unit = unit

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.quantity} {self.unit}"]
        if self.expires_at:
            parts.append(f"Exp: {self.expires_at.strftime(DATE_FORMAT)}")
        if self.category:
            parts.append(f"Category: {self.category}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        exp = d.get("expires_at")
        if exp and not isinstance(exp, (datetime, date)):
            try:
                d["expires_at"] = datetime.strptime(exp, DATE_FORMAT).date()
            except ValueError:
                d["expires_at"] = None
        elif isinstance(exp, datetime):
            d["expires_at"] = exp.date()
        allowed = {"name", "quantity", "unit", "category", "expires_at"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered.setdefault("name", "")
        filtered.setdefault("unit", "")
        filtered["quantity"] = float(filtered.get("quantity") or 0)
        return Ingredient(**filtered)

    def to_dict(self):
        '''Converts the Ingredient object to a plain dictionary.'''
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "expires_at": self.expires_at.strftime(DATE_FORMAT) if self.expires_at else "",
        }
