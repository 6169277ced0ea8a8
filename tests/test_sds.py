from datetime import date, timedelta

from helpers import data_of


def test_expiry_is_derived_from_issue_date(make_sds):
    sds = make_sds(issue_date="2023-01-01")
    assert sds["expiry_date"] == "2028-01-01"
    assert sds["status"] == "ACTIVE"


def test_explicit_expiry_is_kept(make_sds):
    sds = make_sds(issue_date="2023-01-01", expiry_date="2025-06-30")
    assert sds["expiry_date"] == "2025-06-30"


def test_sds_without_issue_date_has_no_expiry(make_sds):
    sds = make_sds(issue_date=None)
    assert sds["expiry_date"] == ""


def test_new_issue_date_moves_expiry(client, make_sds):
    sds = make_sds(issue_date="2023-01-01")
    updated = data_of(client.put(f"/api/sds/{sds['id']}", json={"issue_date": "2024-02-29"}))
    assert updated["expiry_date"] == "2029-02-28"

    # other edits leave the expiry alone
    renamed = data_of(client.put(f"/api/sds/{sds['id']}", json={"product_name": "Acetone Tech"}))
    assert renamed["expiry_date"] == "2029-02-28"


def test_expiry_date_endpoint(client):
    result = data_of(client.get("/api/sds/expiry-date", params={"issue_date": "2023-01-01"}))
    assert result == {"issue_date": "2023-01-01", "expiry_date": "2028-01-01"}


def test_filter_by_expiry_range(client, make_sds):
    make_sds(product_name="Old", issue_date="2015-01-01")
    make_sds(product_name="New", issue_date="2024-01-01")

    result = data_of(client.get("/api/sds/all", params={
        "date_field": "expiry_date",
        "date_type": "between",
        "date_from": "2029-01-01",
        "date_to": "2029-01-01",
    }))
    assert [s["product_name"] for s in result["sds"]] == ["New"]

    before = data_of(client.get("/api/sds/all", params={
        "date_field": "expiry_date", "date_type": "before", "date_from": "2021-01-01"}))
    assert [s["product_name"] for s in before["sds"]] == ["Old"]


def test_request_sds_creates_request_supplier(client):
    payload = {
        "product_name": "Mystery Degreaser",
        "product_code": "MD-9",
        "supplier_name": "Unknown Co",
        "request_info": "Label attached to drum",
    }
    requested = data_of(client.post("/api/sds/request", json=payload))
    assert requested["status"] == "REQUESTED"
    assert requested["supplier_name"] == "DGXprt"
    assert requested["request_supplier_name"] == "Unknown Co"
    assert requested["product_id"] == "MD-9"
    assert requested["request_date"] != ""

    # the request supplier is reused
    second = data_of(client.post("/api/sds/request", json=payload))
    assert second["supplier_id"] == requested["supplier_id"]
    suppliers = data_of(client.get("/api/suppliers/all", params={"search": "DGXprt"}))
    assert suppliers["total"] == 1

    overview = data_of(client.get("/api/sds/overview"))
    assert overview["requested"] == 2


def test_sds_with_products_cannot_be_deleted(client, make_sds, make_product):
    sds = make_sds()
    make_product(sds_id=sds["id"])

    resp = client.delete(f"/api/sds/{sds['id']}")
    assert resp.status_code == 409
    assert resp.json()["status_code"] == "206"


def test_versions_are_numbered_and_deleted_with_sds(client, make_sds):
    sds = make_sds()
    first = data_of(client.post(f"/api/sds/{sds['id']}/versions", json={"file_path": "sds/acetone-v1.pdf"}))
    second = data_of(client.post(f"/api/sds/{sds['id']}/versions", json={"file_path": "sds/acetone-v2.pdf"}))
    assert (first["version_number"], second["version_number"]) == (1, 2)

    current = data_of(client.get(f"/api/sds/{sds['id']}"))
    assert current["current_file_path"] == "sds/acetone-v2.pdf"

    versions = data_of(client.get(f"/api/sds/{sds['id']}/versions"))
    assert [v["version_number"] for v in versions] == [2, 1]

    data_of(client.delete(f"/api/sds/{sds['id']}"))
    assert client.get(f"/api/sds/{sds['id']}/versions").status_code == 404


def test_dg_class_must_be_dg_class_master_data(client, make_sds, master_data_id):
    sds = make_sds()
    resp = client.put(f"/api/sds/{sds['id']}", json={"dg_class_id": master_data_id("UOM", "kg")})
    assert resp.status_code == 400

    dg = master_data_id("DG_CLASS", "Class 3 - Flammable Liquids")
    updated = data_of(client.put(f"/api/sds/{sds['id']}", json={"dg_class_id": dg, "is_dg": True}))
    assert updated["dg_class"] == "Class 3 - Flammable Liquids"


def test_link_ghs_classification(client, make_sds):
    code = data_of(client.get("/api/ghs/codes"))[0]
    statement = data_of(client.post("/api/ghs/hazard-statements", json={
        "hazard_statement_code": "H225",
        "hazard_statement_text": "Highly flammable liquid and vapour"}))
    classification = data_of(client.post("/api/ghs/classifications", json={
        "hazard_class": "Flammable liquids",
        "hazard_category": "Category 2",
        "signal_word": "Danger",
        "ghs_code_id": code["ghs_code_id"],
        "hazard_statement_id": statement["hazard_statement_id"],
    }))
    sds = make_sds()

    link = data_of(client.post(f"/api/sds/{sds['id']}/ghs-classifications",
                               json={"hazard_classification_id": classification["hazard_classification_id"]}))
    assert link["hazard_statement_code"] == "H225"

    again = client.post(f"/api/sds/{sds['id']}/ghs-classifications",
                        json={"hazard_classification_id": classification["hazard_classification_id"]})
    assert again.status_code == 409

    # a linked classification cannot be removed
    assert client.delete(f"/api/ghs/classifications/{classification['hazard_classification_id']}").status_code == 409

    data_of(client.delete(f"/api/sds/{sds['id']}/ghs-classifications/{link['sds_ghs_id']}"))
    assert data_of(client.get(f"/api/sds/{sds['id']}/ghs-classifications")) == []


def test_update_cannot_detach_supplier(client, make_sds):
    sds = make_sds()

    resp = client.put(f"/api/sds/{sds['id']}", json={"supplier_id": None})
    assert resp.status_code == 422
    assert resp.json()["status_code"] == "202"
    assert "supplier_id" in resp.json()["message"]

    assert data_of(client.get(f"/api/sds/{sds['id']}"))["supplier_id"] == sds["supplier_id"]


def test_update_cannot_blank_product_name(client, make_sds):
    sds = make_sds()
    assert client.put(f"/api/sds/{sds['id']}", json={"product_name": None}).status_code == 422
    assert client.put(f"/api/sds/{sds['id']}", json={"is_dg": None}).status_code == 422


def test_overview_counts_expired_and_expiring(client, make_sds):
    today = date.today()
    make_sds(product_name="Current")  # issued 2023, expires 2028
    make_sds(product_name="Old", issue_date="2015-03-01")
    make_sds(product_name="Due", expiry_date=(today + timedelta(days=30)).isoformat())
    make_sds(product_name="Later", expiry_date=(today + timedelta(days=120)).isoformat())
    make_sds(product_name="Lapsed", expiry_date=(today - timedelta(days=1)).isoformat())

    overview = data_of(client.get("/api/sds/overview"))
    assert overview["total"] == 5
    assert overview["expired"] == 2
    assert overview["expiring_soon"] == 1


def test_expiring_window_includes_today_and_last_day(client, make_sds):
    today = date.today()
    make_sds(product_name="Today", expiry_date=today.isoformat())
    make_sds(product_name="Edge", expiry_date=(today + timedelta(days=90)).isoformat())
    make_sds(product_name="Beyond", expiry_date=(today + timedelta(days=91)).isoformat())

    overview = data_of(client.get("/api/sds/overview"))
    assert overview["expired"] == 0
    assert overview["expiring_soon"] == 2


def test_link_precautionary_statement(client, make_sds):
    statement = data_of(client.post("/api/ghs/precautionary-statements", json={
        "code": "P210",
        "statement": "Keep away from heat, hot surfaces, sparks, open flames.",
        "type": "Prevention",
    }))
    sds = make_sds()
    url = f"/api/sds/{sds['id']}/precautionary-statements"

    link = data_of(client.post(url, json={
        "precautionary_statement_id": statement["precautionary_statement_id"]}))
    assert link["code"] == "P210"
    assert link["type"] == "Prevention"

    again = client.post(url, json={"precautionary_statement_id": statement["precautionary_statement_id"]})
    assert again.status_code == 409

    assert [s["code"] for s in data_of(client.get(url))] == ["P210"]

    data_of(client.delete(f"{url}/{link['sds_precautionary_statement_id']}"))
    assert data_of(client.get(url)) == []
