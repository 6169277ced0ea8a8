from datetime import date, timedelta

from helpers import data_of


def test_settings_start_empty(client):
    settings = data_of(client.get("/api/system/settings"))
    assert settings["customer_name"] == ""
    assert settings["auto_update_sds"] is False


def test_first_save_requires_customer_details(client):
    resp = client.put("/api/system/settings", json={"primary_color": "#123456"})
    assert resp.status_code == 400
    assert resp.json()["status_code"] == "203"


def test_settings_upsert(client):
    data_of(client.put("/api/system/settings", json={
        "customer_name": "Acme Mining",
        "customer_email": "safety@acme-chemicals.com.au",
    }))
    updated = data_of(client.put("/api/system/settings", json={"auto_update_sds": True}))
    assert updated["customer_name"] == "Acme Mining"
    assert updated["auto_update_sds"] is True


def test_dashboard_counts(client, make_site_register):
    make_site_register()
    client.post("/api/sds/request", json={"product_name": "Unknown", "product_code": "UNK"})

    overview = data_of(client.get("/api/system/dashboard"))
    assert overview["products"] == 1
    assert overview["site_registers"] == 1
    assert overview["requested_sds"] == 1
    # the register's product SDS was issued in 2023 and is still current
    assert overview["active_sds"] == 1
    assert overview["expired_sds"] == 0


def test_health(client):
    assert client.get("/health").status_code == 200


def test_saved_customer_details_cannot_be_cleared(client):
    data_of(client.put("/api/system/settings", json={
        "customer_name": "Acme Mining",
        "customer_email": "safety@acme-chemicals.com.au",
    }))

    resp = client.put("/api/system/settings", json={"customer_name": None})
    assert resp.status_code == 422
    assert data_of(client.get("/api/system/settings"))["customer_name"] == "Acme Mining"


def test_dashboard_counts_expired_and_expiring_sds(client, make_sds):
    today = date.today()
    make_sds(product_name="Old", issue_date="2016-06-30")
    make_sds(product_name="Due", expiry_date=(today + timedelta(days=10)).isoformat())
    make_sds(product_name="Current")

    overview = data_of(client.get("/api/system/dashboard"))
    assert overview["expired_sds"] == 1
    assert overview["expiring_sds"] == 1
