from __future__ import annotations
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional
from .models import (
    SINGLE, Modifier, ModifierOption, InventoryItem, MenuItemInventoryLink, MenuItem,
)
from .validator import validate, quality_warnings
from .catalog import MenuCatalog

log = logging.getLogger(__name__)


def to_number(v: Any) -> float:
    """Niet-numeriek, NaN, oneindig of negatief -> 0.0 (stil normaliseren, nooit falen)."""
    if isinstance(v, bool):
        return 0.0
    try:
        n = float(v)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(n) or n < 0:
        return 0.0
    return n


def _opt_int(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    try:
        n = int(v)
    except (TypeError, ValueError, OverflowError):
        return None
    return n if n > 0 else None


def _id(d: Dict[str, Any]) -> str:
    return str(d.get("id") or d.get("_id") or "")


def to_option(d: Dict[str, Any]) -> ModifierOption:
    return ModifierOption(
        id=_id(d),
        name=d.get("name", ""),
        price=to_number(d.get("price", 0)),
        is_default=bool(d.get("isDefault", False)),
        name_en=d.get("nameEn"),
    )


def to_modifier(d: Dict[str, Any]) -> Modifier:
    mtype = d.get("type", SINGLE)
    m = Modifier(
        id=_id(d),
        name=d.get("name", ""),
        type=mtype,
        required=bool(d.get("required", False)),
        options=[to_option(o) for o in d.get("options", [])],
        min_selections=_opt_int(d.get("minSelections")),
        max_selections=_opt_int(d.get("maxSelections")),
        name_en=d.get("nameEn"),
        description=d.get("description"),
    )
    if m.is_single:
        # single-select kent geen min, en max is altijd 1
        m.min_selections = None
        m.max_selections = 1
    return m


def to_inventory_item(d: Dict[str, Any]) -> InventoryItem:
    max_level = d.get("maxStockLevel")
    return InventoryItem(
        id=_id(d),
        name=d.get("name") or d.get("ingredientName", ""),
        current_stock=to_number(d.get("currentStock", 0)),
        unit=d.get("unit", "g"),
        min_stock_level=to_number(d.get("minStockLevel", 10)),
        max_stock_level=to_number(max_level) if max_level is not None else None,
    )


def to_link(d: Dict[str, Any]) -> MenuItemInventoryLink:
    return MenuItemInventoryLink(
        inventory_item_id=str(d.get("inventoryItemId", "")),
        portion=to_number(d.get("portion", 1)),
        required=bool(d.get("required", True)),
        unit=d.get("unit"),
    )


def to_menu_item(d: Dict[str, Any]) -> MenuItem:
    dp = d.get("discountPrice")
    return MenuItem(
        id=_id(d),
        name=d.get("name", ""),
        price=to_number(d.get("price", 0)),
        discount_price=to_number(dp) if dp is not None else None,
        modifier_ids=[str(x) for x in d.get("modifiers", [])],
        inventory_items=[to_link(x) for x in d.get("inventoryItems", [])],
        name_en=d.get("nameEn"),
    )


def load_catalog_data(data: Dict[str, Any]) -> MenuCatalog:
    errors = validate(data)
    if errors:
        raise ValueError("Catalog validation failed:\n" + "\n".join(errors))
    for w in quality_warnings(data):
        log.warning("catalog: %s", w)
    items = [to_menu_item(x) for x in data.get("items", [])]
    mods = [to_modifier(x) for x in data.get("modifiers", [])]
    inv = [to_inventory_item(x) for x in data.get("inventory", [])]
    log.info("catalog loaded: %d items, %d modifiers, %d inventory items",
             len(items), len(mods), len(inv))
    return MenuCatalog(items, mods, inv)


def load_catalog(path: str | Path) -> MenuCatalog:
    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    return load_catalog_data(data)
