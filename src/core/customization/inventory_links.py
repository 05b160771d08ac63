from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional
from src.core.menu.models import (
    ConsumptionLine, InventoryItem, MenuItemInventoryLink, ResolvedLink, StockStatus,
)
from .stock import classify
from .units import convert_unit

log = logging.getLogger(__name__)


def _index(catalog: Iterable[InventoryItem]) -> Dict[str, InventoryItem]:
    return {it.id: it for it in catalog}


def _resolve_one(link: MenuItemInventoryLink, inv: Optional[InventoryItem]) -> ResolvedLink:
    if inv is None:
        log.warning("inventory link to unknown item %s", link.inventory_item_id)
        return ResolvedLink(
            inventory_item_id=link.inventory_item_id,
            required=link.required,
            stock_status=StockStatus.UNKNOWN,
            consumption_preview=link.portion,
        )
    return ResolvedLink(
        inventory_item_id=link.inventory_item_id,
        required=link.required,
        stock_status=classify(inv.current_stock, inv.min_stock_level),
        consumption_preview=link.portion,
        name=inv.name,
        current_stock=inv.current_stock,
        unit=inv.unit,
    )


def resolve(links: List[MenuItemInventoryLink],
            catalog: Iterable[InventoryItem]) -> List[ResolvedLink]:
    """Eén resultaat per link, in linkvolgorde. Een losse link blokkeert de rest niet."""
    idx = _index(catalog)
    return [_resolve_one(l, idx.get(l.inventory_item_id)) for l in links]


def required_links_resolved(links: List[MenuItemInventoryLink],
                            catalog: Iterable[InventoryItem]) -> bool:
    idx = _index(catalog)
    return all(l.inventory_item_id in idx for l in links if l.required)


def blocking(resolved: Iterable[ResolvedLink]) -> List[ResolvedLink]:
    """
    Verplichte links waarvan het voorraaditem op is. Een link zonder
    voorraaditem blokkeert niet: onbekend is geen "op".
    """
    return [r for r in resolved
            if r.required and r.stock_status is StockStatus.OUT_OF_STOCK]


def blocking_links(links: List[MenuItemInventoryLink],
                   catalog: Iterable[InventoryItem]) -> List[ResolvedLink]:
    return blocking(resolve(links, catalog))


def is_item_available(links: List[MenuItemInventoryLink],
                      catalog: Iterable[InventoryItem]) -> bool:
    return not blocking_links(links, catalog)


def consumption_preview(links: List[MenuItemInventoryLink],
                        catalog: Iterable[InventoryItem],
                        quantity: int = 1) -> List[ConsumptionLine]:
    """
    Verwacht verbruik voor `quantity` stuks, in de eenheid van het voorraaditem.
    Links zonder voorraaditem, zonder verbruik of met een niet-omrekenbare
    eenheid worden overgeslagen.
    """
    idx = _index(catalog)
    qty = max(1, int(quantity))
    out: List[ConsumptionLine] = []
    for link in links:
        inv = idx.get(link.inventory_item_id)
        if inv is None or link.portion <= 0:
            continue
        amount: Optional[float] = link.portion * qty
        if link.unit and link.unit != inv.unit:
            amount = convert_unit(amount, link.unit, inv.unit)
            if amount is None:
                log.warning("skipping %s: %s not convertible to %s",
                            inv.id, link.unit, inv.unit)
                continue
        out.append(ConsumptionLine(inv.id, inv.name, round(amount, 4), inv.unit))
    return out
