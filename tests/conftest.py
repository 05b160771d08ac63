from pathlib import Path
import pytest
from src.core.menu.models import Modifier, ModifierOption, InventoryItem, MenuItemInventoryLink

DATA = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


def opts(*specs):
    """opts(("a", 3), ("b", 0, True)) -> ModifierOption lijst."""
    out = []
    for s in specs:
        oid, price = s[0], s[1]
        default = s[2] if len(s) > 2 else False
        out.append(ModifierOption(id=oid, name=oid.upper(), price=price, is_default=default))
    return out


@pytest.fixture
def size():
    return Modifier(id="size", name="الحجم", type="single", required=True,
                    options=opts(("small", 0), ("medium", 3), ("large", 5)))


@pytest.fixture
def sauce():
    return Modifier(id="sauce", name="الصوص", type="single", required=False,
                    options=opts(("garlic", 1), ("spicy", 1)))


@pytest.fixture
def extras():
    return Modifier(id="extras", name="إضافات", type="multiple", required=False,
                    max_selections=2, options=opts(("a", 3), ("b", 5), ("c", 2)))


@pytest.fixture
def toppings():
    return Modifier(id="toppings", name="الإضافات", type="multiple", required=True,
                    min_selections=1, options=opts(("a", 3, True), ("b", 5), ("c", 2)))


@pytest.fixture
def inventory():
    return [
        InventoryItem(id="flour", name="طحين", current_stock=15, unit="kg", min_stock_level=10),
        InventoryItem(id="cheese", name="جبن", current_stock=5, unit="kg", min_stock_level=10),
        InventoryItem(id="boxes", name="علب", current_stock=0, unit="piece", min_stock_level=20),
    ]


@pytest.fixture
def links():
    return [
        MenuItemInventoryLink("flour", portion=250, unit="g"),
        MenuItemInventoryLink("ghost", portion=2),
        MenuItemInventoryLink("cheese", portion=0.1, required=False),
    ]


@pytest.fixture
def catalog_path():
    return DATA
