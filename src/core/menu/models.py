from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Any

SINGLE = "single"
MULTIPLE = "multiple"


class StockStatus(str, Enum):
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"
    UNKNOWN = "unknown"  # alleen voor links zonder voorraaditem


@dataclass
class ModifierOption:
    id: str
    name: str
    price: float = 0.0
    is_default: bool = False
    name_en: Optional[str] = None


@dataclass
class Modifier:
    id: str
    name: str
    type: str = SINGLE  # "single" | "multiple"
    required: bool = False
    options: List[ModifierOption] = field(default_factory=list)
    min_selections: Optional[int] = None
    max_selections: Optional[int] = None
    name_en: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_single(self) -> bool:
        return self.type == SINGLE

    def option(self, option_id: str) -> Optional[ModifierOption]:
        for opt in self.options:
            if opt.id == option_id:
                return opt
        return None


@dataclass
class SelectedOption:
    id: str
    name: str
    price: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "price": self.price}


@dataclass
class SelectedModifier:
    modifier_id: str
    modifier_name: str
    selected_options: List[SelectedOption] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modifierId": self.modifier_id,
            "modifierName": self.modifier_name,
            "selectedOptions": [o.to_dict() for o in self.selected_options],
        }


@dataclass
class InventoryItem:
    id: str
    name: str
    current_stock: float = 0.0
    unit: str = "g"
    min_stock_level: float = 10.0
    max_stock_level: Optional[float] = None


@dataclass
class MenuItemInventoryLink:
    inventory_item_id: str
    portion: float = 1.0
    required: bool = True
    unit: Optional[str] = None  # eenheid van de portie, None = zelfde als voorraad


@dataclass
class ResolvedLink:
    inventory_item_id: str
    required: bool
    stock_status: StockStatus
    consumption_preview: float
    name: Optional[str] = None
    current_stock: Optional[float] = None
    unit: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.stock_status is not StockStatus.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "inventoryItemId": self.inventory_item_id,
            "required": self.required,
            "stockStatus": self.stock_status.value,
            "consumptionPreview": self.consumption_preview,
        }
        if self.found:
            d.update({"name": self.name, "currentStock": self.current_stock, "unit": self.unit})
        return d


@dataclass
class MenuItem:
    id: str
    name: str
    price: float = 0.0
    discount_price: Optional[float] = None
    modifier_ids: List[str] = field(default_factory=list)
    inventory_items: List[MenuItemInventoryLink] = field(default_factory=list)
    name_en: Optional[str] = None

    @property
    def effective_price(self) -> float:
        """Kortingsprijs als die gezet, positief en lager is dan de lijstprijs."""
        dp = self.discount_price
        if dp is not None and 0 < dp < self.price:
            return dp
        return self.price


@dataclass
class ConsumptionLine:
    inventory_item_id: str
    name: str
    quantity: float
    unit: str

    def to_dict(self) -> Dict[str, Any]:
        return {"inventoryItemId": self.inventory_item_id, "name": self.name,
                "quantity": self.quantity, "unit": self.unit}
