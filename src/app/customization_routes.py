from __future__ import annotations
from functools import lru_cache
from fastapi import APIRouter, HTTPException
from pydantic import AliasChoices, BaseModel, Field
from typing import Any, Dict, List, Literal, Optional

from src.core.menu.catalog import MenuCatalog
from src.core.menu.loader import load_catalog, to_modifier, to_link, to_inventory_item, to_number
from src.core.customization.session import CustomizationSession
from src.core.customization.constraints import selection_hint
from src.core.customization import inventory_links
from src.core.customization.units import format_quantity
from src.infra.settings import settings

router = APIRouter(tags=["customization"])


# -------- Invoer --------
# Getallen blijven Any: de engine normaliseert zelf (onzin -> 0).

class OptionIn(BaseModel):
    id: str
    name: str
    nameEn: Optional[str] = None
    price: Any = 0
    isDefault: bool = False


class ModifierIn(BaseModel):
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str
    nameEn: Optional[str] = None
    description: Optional[str] = None
    type: Literal["single", "multiple"] = "single"
    required: bool = False
    minSelections: Optional[int] = None
    maxSelections: Optional[int] = None
    options: List[OptionIn] = []


class ToggleIn(BaseModel):
    modifierId: str
    optionId: str


class DefaultsIn(BaseModel):
    modifiers: List[ModifierIn]
    basePrice: Any = 0


class PriceIn(BaseModel):
    modifiers: List[ModifierIn]
    basePrice: Any = 0
    toggles: List[ToggleIn] = []
    fromEmpty: bool = False  # True: niet met defaults beginnen
    quantity: int = Field(default=1, ge=1)


class LinkIn(BaseModel):
    inventoryItemId: str
    portion: Any = 1
    required: bool = True
    unit: Optional[str] = None


class InventoryIn(BaseModel):
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str = Field(validation_alias=AliasChoices("name", "ingredientName"))
    currentStock: Any = 0
    unit: str = "g"
    minStockLevel: Any = 10
    maxStockLevel: Any = None


class ResolveIn(BaseModel):
    links: List[LinkIn]
    inventory: List[InventoryIn]
    quantity: int = Field(default=1, ge=1)


# -------- Helpers --------

def _session(modifiers: List[ModifierIn], base_price: Any) -> CustomizationSession:
    mods = [to_modifier(m.model_dump()) for m in modifiers]
    return CustomizationSession(mods, to_number(base_price))


def _inventory(links, catalog, quantity: int) -> Dict[str, Any]:
    resolved = inventory_links.resolve(links, catalog)
    return {
        "links": [r.to_dict() for r in resolved],
        "requiredLinksResolved": all(r.found for r in resolved if r.required),
        "available": not inventory_links.blocking(resolved),
        "consumption": [
            dict(c.to_dict(), label=format_quantity(c.quantity, c.unit))
            for c in inventory_links.consumption_preview(links, catalog, quantity)
        ],
    }


def _result(s: CustomizationSession) -> Dict[str, Any]:
    out = s.snapshot()
    out["missingRequired"] = [m.name for m in s.missing_required()]
    out["hints"] = {m.id: selection_hint(m) for m in s.modifiers}
    out["currency"] = settings.CURRENCY_LABEL
    return out


# -------- Endpoints --------

@router.post("/customization/defaults")
def customization_defaults(payload: DefaultsIn):
    s = _session(payload.modifiers, payload.basePrice)
    out = _result(s)
    out["selections"] = {mid: sorted(ids) for mid, ids in s.selections.items()}
    return out


@router.post("/customization/price")
def customization_price(payload: PriceIn):
    s = _session(payload.modifiers, payload.basePrice)
    if payload.fromEmpty:
        s.clear()
    noop = 0
    for t in payload.toggles:
        if not s.toggle(t.modifierId, t.optionId):
            noop += 1
    out = _result(s)
    out["noopToggles"] = noop
    out["quantity"] = payload.quantity
    out["lineTotal"] = s.line_total(payload.quantity)
    return out


@router.post("/inventory/resolve")
def inventory_resolve(payload: ResolveIn):
    links = [to_link(l.model_dump()) for l in payload.links]
    catalog = [to_inventory_item(i.model_dump()) for i in payload.inventory]
    return _inventory(links, catalog, payload.quantity)


# -------- Catalogus uit MENU_JSON --------

@lru_cache(maxsize=1)
def get_catalog() -> MenuCatalog:
    return load_catalog(settings.MENU_JSON)


@router.get("/menu/{item_id}/customization")
def item_customization(item_id: str, quantity: int = 1):
    catalog = get_catalog()
    item = catalog.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="unknown menu item")
    s = CustomizationSession(catalog.modifiers_for(item), item.effective_price)
    out = _result(s)
    out["itemId"] = item.id
    out["itemName"] = item.name
    out["basePrice"] = item.effective_price
    out["inventory"] = _inventory(item.inventory_items, catalog.inventory, quantity)
    return out
