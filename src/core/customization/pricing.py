from __future__ import annotations
from typing import Any, Iterable
from src.core.menu.loader import to_number
from src.core.menu.models import SelectedModifier


def price(base_price: Any, selections: Iterable[SelectedModifier]) -> float:
    """
    Prijs per stuk: basisprijs + som van alle gekozen opties.
    Korting kiest de aanroeper vooraf (MenuItem.effective_price).
    """
    total = to_number(base_price)
    for sel in selections:
        for opt in sel.selected_options:
            total += to_number(opt.price)
    return round(total, 2)
