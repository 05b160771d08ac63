from __future__ import annotations
from typing import Any
from src.core.menu.loader import to_number
from src.core.menu.models import StockStatus


def classify(current_stock: Any, min_stock_level: Any) -> StockStatus:
    """Eerste match wint: op (<= 0), bijna op (<= minimum), anders op voorraad."""
    current = to_number(current_stock)
    minimum = to_number(min_stock_level)
    if current <= 0:
        return StockStatus.OUT_OF_STOCK
    if current <= minimum:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK
