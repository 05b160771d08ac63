from __future__ import annotations
from typing import Dict, List, Optional
from .models import Modifier, InventoryItem, MenuItem


class MenuCatalog:
    def __init__(self, items: List[MenuItem], modifiers: List[Modifier],
                 inventory: List[InventoryItem]):
        self.by_id: Dict[str, MenuItem] = {it.id: it for it in items}
        self.modifiers: Dict[str, Modifier] = {m.id: m for m in modifiers}
        self.inventory: List[InventoryItem] = list(inventory)

    def get(self, item_id: str) -> Optional[MenuItem]:
        return self.by_id.get(item_id)

    def modifiers_for(self, item: MenuItem) -> List[Modifier]:
        """Modifiers in de volgorde van het item; onbekende ids vallen weg."""
        return [self.modifiers[mid] for mid in item.modifier_ids if mid in self.modifiers]
