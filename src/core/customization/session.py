from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Set, Union
from src.core.menu.models import Modifier, SelectedModifier, SelectedOption
from . import constraints, defaults, pricing

log = logging.getLogger(__name__)


class CustomizationSession:
    """
    Keuzetoestand voor één item dat door één klant wordt samengesteld.

    Elke mutatie herberekent direct selected_modifiers, total_price en
    can_checkout; er wordt niets uitgesteld of gecachet tussen acties.
    Sessies worden nooit gedeeld, ook niet voor hetzelfde item.
    """

    def __init__(self, modifiers: List[Modifier], base_price: float = 0.0):
        self.modifiers: List[Modifier] = []
        self.base_price = 0.0
        self.selections: Dict[str, Set[str]] = {}
        self.selected_modifiers: List[SelectedModifier] = []
        self.total_price = 0.0
        self.can_checkout = False
        self.reset(modifiers, base_price)

    # ---------- lifecycle ----------

    def reset(self, modifiers: Optional[List[Modifier]] = None,
              base_price: Optional[float] = None) -> None:
        """Gooit alle keuzes weg en zaait opnieuw de defaults."""
        if modifiers is not None:
            self.modifiers = list(modifiers)
        if base_price is not None:
            self.base_price = base_price
        self._by_id = {m.id: m for m in self.modifiers}
        self.selections = defaults.initialize(self.modifiers)
        self._recompute()

    def clear(self) -> None:
        """Alles leeg, zonder defaults (klant stuurt zelf de volledige keuze)."""
        self.selections = {m.id: set() for m in self.modifiers}
        self._recompute()

    # ---------- queries ----------

    def get_modifier(self, modifier_id: str) -> Optional[Modifier]:
        return self._by_id.get(modifier_id)

    def current(self, modifier_id: str) -> Set[str]:
        return set(self.selections.get(modifier_id, set()))

    def is_selected(self, modifier_id: str, option_id: str) -> bool:
        return option_id in self.selections.get(modifier_id, set())

    def can_select(self, modifier_id: str, option_id: str) -> bool:
        m = self._by_id.get(modifier_id)
        if m is None or m.option(option_id) is None:
            return False
        return constraints.can_select(m, self.selections[m.id], option_id)

    def can_deselect(self, modifier_id: str, option_id: str) -> bool:
        m = self._by_id.get(modifier_id)
        if m is None or not self.is_selected(modifier_id, option_id):
            return False
        return constraints.can_deselect(m, self.selections[m.id], option_id)

    def missing_required(self) -> List[Modifier]:
        return constraints.missing_required(self.modifiers, self.selections)

    # ---------- mutaties ----------

    def toggle(self, modifier: Union[Modifier, str], option_id: str) -> bool:
        """
        Single: vervang de keuze door {option_id}.
        Multiple: aan/uit, mits min/max het toelaten.
        Ongeldige acties zijn stille no-ops. Geeft True als de toestand wijzigde.
        """
        mid = modifier.id if isinstance(modifier, Modifier) else modifier
        m = self._by_id.get(mid)
        if m is None or m.option(option_id) is None:
            log.debug("toggle ignored: unknown %s/%s", mid, option_id)
            return False

        cur = self.selections[m.id]
        if m.is_single:
            new = {option_id}
        elif option_id in cur:
            if not constraints.can_deselect(m, cur, option_id):
                return False
            new = cur - {option_id}
        else:
            if not constraints.can_select(m, cur, option_id):
                return False
            new = cur | {option_id}

        if new == cur:
            return False
        self.selections[m.id] = new
        self._recompute()
        return True

    def _recompute(self) -> None:
        out: List[SelectedModifier] = []
        for m in self.modifiers:
            chosen = self.selections.get(m.id, set())
            opts = [SelectedOption(id=o.id, name=o.name, price=o.price)
                    for o in m.options if o.id in chosen]
            if opts:
                out.append(SelectedModifier(m.id, m.name, opts))
        self.selected_modifiers = out
        self.total_price = pricing.price(self.base_price, out)
        self.can_checkout = constraints.can_checkout(self.modifiers, self.selections)

    # ---------- output ----------

    def line_total(self, quantity: int = 1) -> float:
        """Prijs per stuk x aantal (minimaal 1)."""
        return round(self.total_price * max(1, int(quantity)), 2)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "selectedModifiers": [s.to_dict() for s in self.selected_modifiers],
            "totalPrice": self.total_price,
            "canCheckout": self.can_checkout,
        }
