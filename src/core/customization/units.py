from __future__ import annotations
import logging
from typing import Dict, Optional

log = logging.getLogger(__name__)

# omrekenfactor naar basiseenheid (g, ml, stuk)
WEIGHT: Dict[str, float] = {"g": 1, "kg": 1000, "mg": 0.001, "lb": 453.592, "oz": 28.3495}
VOLUME: Dict[str, float] = {"ml": 1, "l": 1000, "cup": 240, "tbsp": 15, "tsp": 5}
COUNT: Dict[str, float] = {"piece": 1, "unit": 1, "dozen": 12, "serving": 1, "portion": 1}

_CATEGORIES = {"weight": WEIGHT, "volume": VOLUME, "count": COUNT}

UNIT_LABELS: Dict[str, Dict[str, str]] = {
    "g": {"ar": "جرام", "en": "Gram"},
    "kg": {"ar": "كيلوجرام", "en": "Kilogram"},
    "mg": {"ar": "مليجرام", "en": "Milligram"},
    "lb": {"ar": "رطل", "en": "Pound"},
    "oz": {"ar": "أونصة", "en": "Ounce"},
    "ml": {"ar": "مليلتر", "en": "Milliliter"},
    "l": {"ar": "لتر", "en": "Liter"},
    "cup": {"ar": "كوب", "en": "Cup"},
    "tbsp": {"ar": "ملعقة كبيرة", "en": "Tablespoon"},
    "tsp": {"ar": "ملعقة صغيرة", "en": "Teaspoon"},
    "piece": {"ar": "قطعة", "en": "Piece"},
    "unit": {"ar": "وحدة", "en": "Unit"},
    "dozen": {"ar": "دستة", "en": "Dozen"},
    "serving": {"ar": "حصة", "en": "Serving"},
    "portion": {"ar": "جزء", "en": "Portion"},
}


def unit_category(unit: str) -> Optional[str]:
    for name, table in _CATEGORIES.items():
        if unit in table:
            return name
    return None


def compatible(a: str, b: str) -> bool:
    ca = unit_category(a)
    return ca is not None and ca == unit_category(b)


def convert_unit(quantity: float, from_unit: str, to_unit: str) -> Optional[float]:
    """None als de eenheden niet in dezelfde categorie vallen."""
    if from_unit == to_unit:
        return quantity
    if not compatible(from_unit, to_unit):
        log.warning("cannot convert %s -> %s", from_unit, to_unit)
        return None
    table = _CATEGORIES[unit_category(from_unit)]
    return quantity * table[from_unit] / table[to_unit]


def format_quantity(quantity: float, unit: str, lang: str = "ar") -> str:
    q = int(quantity) if float(quantity).is_integer() else round(quantity, 3)
    label = UNIT_LABELS.get(unit)
    if not label:
        return f"{q} {unit}"
    return f"{q} {label.get(lang, label['en'])}"
