import logging
import pytest
from fastapi.testclient import TestClient
from src.app import customization_routes
from src.app.app import app
from src.core.menu.loader import load_catalog

client = TestClient(app)

MODIFIERS = [
    {"_id": "size", "name": "الحجم", "type": "single", "required": True, "options": [
        {"id": "small", "name": "صغير", "price": 0},
        {"id": "large", "name": "كبير", "price": 5},
    ]},
    {"id": "extras", "name": "إضافات", "type": "multiple", "maxSelections": 2, "options": [
        {"id": "a", "name": "A", "price": 3},
        {"id": "b", "name": "B", "price": 5},
        {"id": "c", "name": "C", "price": "free"},
    ]},
]


@pytest.fixture
def file_catalog(monkeypatch, catalog_path):
    cat = load_catalog(catalog_path)
    monkeypatch.setattr(customization_routes, "get_catalog", lambda: cat)
    return cat


def test_health():
    assert client.get("/healthz").json() == {"ok": True}
    assert client.get("/").json()["status"] == "ok"


def test_defaults():
    r = client.post("/customization/defaults", json={"modifiers": MODIFIERS, "basePrice": 20})
    assert r.status_code == 200
    body = r.json()
    assert body["selections"] == {"size": ["small"], "extras": []}
    assert body["totalPrice"] == 20
    assert body["canCheckout"] is True
    assert body["hints"]["extras"] == "اختر حتى 2 خيارات"


def test_price_replays_toggles():
    r = client.post("/customization/price", json={
        "modifiers": MODIFIERS, "basePrice": 20, "quantity": 2,
        "toggles": [
            {"modifierId": "size", "optionId": "large"},
            {"modifierId": "extras", "optionId": "a"},
            {"modifierId": "extras", "optionId": "b"},
            {"modifierId": "extras", "optionId": "c"},  # max 2
        ],
    })
    body = r.json()
    assert body["totalPrice"] == 33
    assert body["lineTotal"] == 66
    assert body["noopToggles"] == 1
    assert body["missingRequired"] == []
    assert [s["modifierId"] for s in body["selectedModifiers"]] == ["size", "extras"]


def test_price_from_empty_blocks_checkout():
    r = client.post("/customization/price", json={
        "modifiers": MODIFIERS, "basePrice": 20, "fromEmpty": True,
        "toggles": [{"modifierId": "extras", "optionId": "c"}],
    })
    body = r.json()
    assert body["canCheckout"] is False
    assert body["missingRequired"] == ["الحجم"]
    assert body["totalPrice"] == 20  # prijs "free" -> 0


def test_price_rejects_bad_type():
    bad = [dict(MODIFIERS[0], type="radio")]
    r = client.post("/customization/price", json={"modifiers": bad})
    assert r.status_code == 422


def test_inventory_resolve():
    r = client.post("/inventory/resolve", json={
        "links": [
            {"inventoryItemId": "flour", "portion": 250, "unit": "g"},
            {"inventoryItemId": "ghost", "portion": "x"},
            {"inventoryItemId": "boxes", "portion": 1, "required": False},
        ],
        "inventory": [
            {"_id": "flour", "ingredientName": "طحين", "currentStock": 15, "unit": "kg", "minStockLevel": 10},
            {"id": "boxes", "name": "علب", "currentStock": 0, "unit": "piece"},
        ],
    })
    body = r.json()
    assert [l["stockStatus"] for l in body["links"]] == ["in_stock", "unknown", "out_of_stock"]
    assert body["links"][1]["consumptionPreview"] == 0
    assert body["requiredLinksResolved"] is False
    # losse link en optionele lege voorraad blokkeren het item niet
    assert body["available"] is True
    assert body["consumption"][0]["label"] == "0.25 كيلوجرام"


def test_item_customization_from_catalog(file_catalog):
    r = client.get("/menu/latte/customization", params={"quantity": 2})
    assert r.status_code == 200
    body = r.json()
    assert body["basePrice"] == 15
    assert body["totalPrice"] == 15
    assert body["canCheckout"] is True
    inv = body["inventory"]
    assert [l["stockStatus"] for l in inv["links"]] == ["in_stock", "low_stock", "out_of_stock"]
    assert inv["available"] is True  # bekers zijn optioneel
    assert [(c["inventoryItemId"], c["quantity"]) for c in inv["consumption"]] == [
        ("coffee-beans", 0.036), ("milk-full", 0.4), ("cups", 2),
    ]


def test_item_customization_unknown_item(file_catalog):
    assert client.get("/menu/nope/customization").status_code == 404


def test_logs_without_database():
    assert client.get("/logs").status_code == 404


def test_price_with_infinite_base_price_is_normalised():
    r = client.post("/customization/price", json={"modifiers": MODIFIERS, "basePrice": "Infinity"})
    assert r.status_code == 200
    assert r.json()["totalPrice"] == 0


def test_inventory_resolve_warns_once_per_dangling_link(caplog):
    with caplog.at_level(logging.WARNING):
        r = client.post("/inventory/resolve", json={
            "links": [{"inventoryItemId": "ghost", "portion": 1}],
            "inventory": [],
        })
    assert r.json()["available"] is True
    dangling = [rec for rec in caplog.records if "ghost" in rec.getMessage()]
    assert len(dangling) == 1


@pytest.mark.parametrize("limit", [-1, 0, 5000])
def test_logs_limit_is_bounded(limit):
    assert client.get("/logs", params={"limit": limit}).status_code == 422
