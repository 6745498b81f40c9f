"""Unit reconciliation engine.

Pure helpers that turn free-text kitchen units ("kg", "Kilos", "cda",
"tazas") into a canonical value per dimension, do stock arithmetic across
units and pick the most readable unit for display.

Provides normalize, to_display, auto_scale, subtract, add, format_quantity,
parse_locale_number, clean_name and round_safe. Nothing here raises on bad
input: unknown units fall back to the count dimension and incompatible
subtractions return None.
"""
from __future__ import annotations
import math
import re
import sys
import unicodedata
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple


class Dimension(str, Enum):
    MASS = "mass"
    VOLUME = "volume"
    COUNT = "count"


class CanonicalValue(NamedTuple):
    value: float
    dimension: Dimension


class DisplayQuantity(NamedTuple):
    quantity: float
    unit: str


# label variant -> (dimension, factor to base unit); base is g / ml / unit
UNIT_TABLE: Dict[str, Tuple[Dimension, float]] = {}


def _register(dimension: Dimension, factor: float, *labels: str) -> None:
    for label in labels:
        UNIT_TABLE[label] = (dimension, factor)


_register(Dimension.MASS, 1000, 'kg', 'kilo', 'kilogramo')
_register(Dimension.MASS, 1, 'g', 'gr', 'gramo')
_register(Dimension.MASS, 0.001, 'mg', 'miligramo')
_register(Dimension.MASS, 453.59, 'lb', 'libra', 'pound')
_register(Dimension.MASS, 28.35, 'oz', 'onza', 'ounce')

_register(Dimension.VOLUME, 1000, 'l', 'litro', 'lt')
_register(Dimension.VOLUME, 1, 'ml', 'mililitro', 'cc')
_register(Dimension.VOLUME, 10, 'cl', 'centilitro')
_register(Dimension.VOLUME, 100, 'dl', 'decilitro')
_register(Dimension.VOLUME, 240, 'taza', 'cup', 'vaso')
_register(Dimension.VOLUME, 15, 'cucharada', 'tbsp', 'cda')
_register(Dimension.VOLUME, 5, 'cucharadita', 'tsp', 'cdta')
_register(Dimension.VOLUME, 473.17, 'pinta', 'pint', 'pt')
_register(Dimension.VOLUME, 3785.41, 'galon', 'galón', 'gallon', 'gal')
_register(Dimension.VOLUME, 29.57, 'onza fluida', 'fl oz')

_register(Dimension.COUNT, 12, 'docena')

COUNT_UNIT = 'uds'

# Units auto_scale is allowed to touch; everything else keeps the caller's label.
_SCALE_UP = {
    ('g', 'gramo', 'gr'): 'kg',
    ('ml', 'mililitro'): 'l',
}
_SCALE_DOWN = {
    ('kg', 'kilo', 'kilogramo'): 'g',
    ('l', 'litro'): 'ml',
}

_PAREN_RE = re.compile(r'\(.*\)')
_NAME_STRIP_RE = re.compile(r'[^a-z0-9ñ ]')
_NUMBER_RE = re.compile(r'^\d*[.,]?\d*$')


def round_safe(value: float, decimals: int = 3) -> float:
    """Round half-up to `decimals` places, nudging by machine epsilon first.

    Keeps results like 2.1 from coming back as 2.0999999.
    """
    factor = 10 ** decimals
    return math.floor((value + sys.float_info.epsilon) * factor + 0.5) / factor


def _clean_unit(unit: str) -> str:
    u = (unit or '').lower().strip()
    if u.endswith('.'):
        u = u[:-1]
    return u


def _lookup(unit: str) -> Optional[Tuple[Dimension, float]]:
    u = _clean_unit(unit)
    singular = u[:-1] if u.endswith('s') else u
    if singular in UNIT_TABLE:
        return UNIT_TABLE[singular]
    if u.endswith('es') and len(u) > 4 and u[:-2] in UNIT_TABLE:
        return UNIT_TABLE[u[:-2]]
    return None


def normalize(quantity: float, unit: str) -> CanonicalValue:
    """Express `quantity` in its dimension's base unit (g, ml or bare units).

    Unrecognized labels pass through unchanged as a count.
    """
    entry = _lookup(unit)
    if entry is None:
        return CanonicalValue(quantity, Dimension.COUNT)
    dimension, factor = entry
    return CanonicalValue(quantity * factor, dimension)


def to_display(canonical: CanonicalValue) -> DisplayQuantity:
    """Pick kg/g, l/ml or uds for a canonical value."""
    value, dimension = canonical
    if dimension == Dimension.MASS:
        if value >= 1000:
            return DisplayQuantity(round_safe(value / 1000), 'kg')
        return DisplayQuantity(round_safe(value), 'g')
    if dimension == Dimension.VOLUME:
        if value >= 1000:
            return DisplayQuantity(round_safe(value / 1000), 'l')
        return DisplayQuantity(round_safe(value), 'ml')
    return DisplayQuantity(round_safe(value), COUNT_UNIT)


def compatible(a: Dimension, b: Dimension) -> bool:
    """Same dimension, or the mass/volume pair (1 g is taken as 1 ml)."""
    if a == b:
        return True
    return {a, b} == {Dimension.MASS, Dimension.VOLUME}


def subtract(source_qty: float, source_unit: str,
             used_qty: float, used_unit: str) -> Optional[DisplayQuantity]:
    """Remaining stock after using `used_qty` of `used_unit`.

    Returns None when the two units cannot be compared (e.g. uds vs g).
    The result never goes below zero.
    """
    source = normalize(source_qty, source_unit)
    used = normalize(used_qty, used_unit)
    if not compatible(source.dimension, used.dimension):
        return None
    remaining = max(0.0, source.value - used.value)
    return to_display(CanonicalValue(remaining, source.dimension))


def add(current_qty: float, current_unit: str,
        added_qty: float, added_unit: str) -> DisplayQuantity:
    """Stock after adding `added_qty` of `added_unit`.

    Incompatible units are summed naively and keep the current unit.
    """
    current = normalize(current_qty, current_unit)
    added = normalize(added_qty, added_unit)
    if not compatible(current.dimension, added.dimension):
        return DisplayQuantity(round_safe(current_qty + added_qty), current_unit)
    return to_display(CanonicalValue(current.value + added.value, current.dimension))


def auto_scale(quantity: float, unit: str) -> DisplayQuantity:
    """Rescale g/kg and ml/l pairs to the readable sibling, keep any other unit."""
    u = (unit or '').lower().strip()
    # scale-up is checked on the rounded value so 999.9996 g reads as 1 kg
    rounded = round_safe(quantity)
    for labels, target in _SCALE_UP.items():
        if u in labels and rounded >= 1000:
            return DisplayQuantity(round_safe(quantity / 1000), target)
    for labels, target in _SCALE_DOWN.items():
        if u in labels and 0 < quantity < 1:
            scaled = round_safe(quantity * 1000)
            # 0.9999996 kg would read as 1000 g and flip back on the next call
            if scaled >= 1000:
                return DisplayQuantity(rounded, unit)
            return DisplayQuantity(scaled, target)
    return DisplayQuantity(rounded, unit)


def format_quantity(quantity: float, unit: str) -> str:
    """Display text: 3 decimals for kg and l, otherwise integer or one decimal."""
    if (unit or '').lower() in ('kg', 'l'):
        return f"{quantity:.3f}"
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:.1f}"


def parse_locale_number(text: str) -> float:
    """Parse "2,5" or "2.5" into a float; anything unparseable gives 0.0."""
    if not isinstance(text, str):
        return 0.0
    s = text.strip()
    if not s or not _NUMBER_RE.match(s):
        return 0.0
    s = s.replace(',', '.')
    if s == '.':
        return 0.0
    return float(s)


def _strip_accents(text: str) -> str:
    # compose first so a decomposed n + U+0303 is kept as ñ
    text = unicodedata.normalize('NFC', text)
    out = []
    for ch in text:
        if ch == 'ñ':
            out.append(ch)
            continue
        decomposed = unicodedata.normalize('NFD', ch)
        out.append(''.join(c for c in decomposed if not unicodedata.combining(c)))
    return ''.join(out)


def clean_name(name: str) -> str:
    """Matching key for ingredient/product names.

    "Tomates (grandes)" -> "tomate". Plural stripping is a plain suffix
    rule, so words that merely end in s/es are shortened too.
    """
    if not name:
        return ''
    n = _strip_accents(name.lower())
    n = _PAREN_RE.sub('', n)
    n = _NAME_STRIP_RE.sub('', n).strip()
    if n.endswith('s'):
        n = n[:-1]
    if n.endswith('es'):
        n = n[:-2]
    return n.strip()


__all__ = [
    'Dimension', 'CanonicalValue', 'DisplayQuantity', 'UNIT_TABLE', 'COUNT_UNIT',
    'round_safe', 'normalize', 'to_display', 'compatible', 'subtract', 'add',
    'auto_scale', 'format_quantity', 'parse_locale_number', 'clean_name',
]
