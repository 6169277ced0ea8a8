import unittest
from decimal import Decimal

from compliance_service.app.crud.site_registers.stock_movements_crud import apply_stock_action
from compliance_service.app.enum.site_register_enum import StockAction
from helpers import data_of


class ApplyStockActionTests(unittest.TestCase):
    def test_increase(self):
        self.assertEqual(apply_stock_action(10, StockAction.INCREASE, 5), Decimal("15"))

    def test_decrease(self):
        self.assertEqual(apply_stock_action(10, StockAction.DECREASE, 4), Decimal("6"))

    def test_decrease_to_zero(self):
        self.assertEqual(apply_stock_action(Decimal("2.5"), StockAction.DECREASE, 2.5), Decimal("0"))

    def test_decrease_below_zero_fails(self):
        with self.assertRaises(ValueError):
            apply_stock_action(3, StockAction.DECREASE, 5)

    def test_override_replaces_level(self):
        self.assertEqual(apply_stock_action(10, StockAction.OVERRIDE, 7), Decimal("7"))

    def test_missing_level_counts_as_zero(self):
        self.assertEqual(apply_stock_action(None, StockAction.INCREASE, 1), Decimal("1"))


def _move(client, register_id, action, quantity, reason_id):
    return client.post(f"/api/site-registers/{register_id}/stock-movements", json={
        "action": action,
        "quantity": quantity,
        "reason_id": reason_id,
    })


def test_stock_movements_update_current_level(client, make_site_register, master_data_id):
    register = make_site_register(current_stock_level=10)
    purchase = master_data_id("STOCK_REASON", "Purchase")
    usage = master_data_id("STOCK_REASON", "Usage")

    result = data_of(_move(client, register["id"], "INCREASE", 5, purchase))
    assert result["current_stock_level"] == 15
    assert result["movement"]["reason"] == "Purchase"

    result = data_of(_move(client, register["id"], "DECREASE", 15, usage))
    assert result["current_stock_level"] == 0

    movements = data_of(client.get(f"/api/site-registers/{register['id']}/stock-movements"))
    assert len(movements) == 2


def test_decrease_below_zero_is_rejected(client, make_site_register, master_data_id):
    register = make_site_register(current_stock_level=3)

    resp = _move(client, register["id"], "DECREASE", 5, master_data_id("STOCK_REASON", "Usage"))
    assert resp.status_code == 400
    assert resp.json()["status_code"] == "202"

    unchanged = data_of(client.get(f"/api/site-registers/{register['id']}"))
    assert unchanged["current_stock_level"] == 3
    assert data_of(client.get(f"/api/site-registers/{register['id']}/stock-movements")) == []


def test_reason_must_be_stock_reason(client, make_site_register, master_data_id):
    register = make_site_register()
    resp = _move(client, register["id"], "INCREASE", 1, master_data_id("UOM", "L"))
    assert resp.status_code == 400


def test_location_filter_includes_child_locations(client, make_product, make_location, make_site_register):
    region = make_location("Queensland")
    site = make_location("Brisbane Depot", parent_id=region["id"])
    other = make_location("Victoria")
    product = make_product()

    make_site_register(product_id=product["id"], location_id=site["id"])
    make_site_register(product_id=product["id"], location_id=other["id"])

    result = data_of(client.get("/api/site-registers/all", params={"location_id": region["id"]}))
    assert result["total"] == 1
    assert result["site_registers"][0]["location_path"] == "Queensland > Brisbane Depot"


def test_register_reports_product_and_uom(make_product, make_site_register):
    product = make_product(product_name="Diesel")
    register = make_site_register(product_id=product["id"])
    assert register["product_name"] == "Diesel"
    assert register["status"] == "ACTIVE"


def test_register_with_risk_assessment_cannot_be_deleted(client, make_site_register):
    register = make_site_register()
    data_of(client.post("/api/risk-assessments/", json={"site_register_record_id": register["id"]}))

    assert client.delete(f"/api/site-registers/{register['id']}").status_code == 409


def test_update_cannot_detach_product_or_location(client, make_site_register):
    register = make_site_register()

    for field in ("product_id", "location_id", "current_stock_level", "placarding_required"):
        resp = client.put(f"/api/site-registers/{register['id']}", json={field: None})
        assert resp.status_code == 422
        assert field in resp.json()["message"]

    unchanged = data_of(client.get(f"/api/site-registers/{register['id']}"))
    assert unchanged["product_id"] == register["product_id"]
    assert unchanged["location_id"] == register["location_id"]
