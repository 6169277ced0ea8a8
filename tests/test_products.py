import pytest

from helpers import data_of


def test_create_product_joins_sds_and_supplier(client, make_supplier, make_sds, make_product):
    supplier = make_supplier(supplier_name="Acme Chemicals")
    sds = make_sds(supplier_id=supplier["id"], is_dg=True)
    product = make_product(product_name="Acetone 5L", sds_id=sds["id"])

    assert product["sds_id"] == sds["id"]
    assert product["supplier_name"] == "Acme Chemicals"
    assert product["is_dg"] is True
    assert product["uom"] == "L"
    assert product["approval_status"] == "PENDING"


@pytest.mark.parametrize("missing", ["product_name", "product_code", "uom_id", "unit_size", "sds_id"])
def test_required_fields(client, make_sds, master_data_id, missing):
    payload = {
        "product_name": "Thinners",
        "product_code": "TH-1",
        "uom_id": master_data_id("UOM", "L"),
        "unit_size": 1,
        "sds_id": make_sds()["id"],
    }
    payload.pop(missing)

    resp = client.post("/api/products/", json=payload)
    assert resp.status_code == 422
    assert missing in resp.json()["message"]


def test_blank_name_is_rejected(client, make_sds, master_data_id):
    resp = client.post("/api/products/", json={
        "product_name": "   ",
        "product_code": "TH-1",
        "uom_id": master_data_id("UOM", "L"),
        "unit_size": 1,
        "sds_id": make_sds()["id"],
    })
    assert resp.status_code == 422


def test_unit_size_must_be_positive(client, make_sds, master_data_id):
    resp = client.post("/api/products/", json={
        "product_name": "Thinners",
        "product_code": "TH-1",
        "uom_id": master_data_id("UOM", "L"),
        "unit_size": 0,
        "sds_id": make_sds()["id"],
    })
    assert resp.status_code == 422


def test_duplicate_product_on_create(client, make_sds, make_product):
    sds = make_sds()
    make_product(product_name="Acetone", product_code="ACE", sds_id=sds["id"])

    resp = client.post("/api/products/", json={
        "product_name": "Acetone",
        "product_code": "ACE",
        "uom_id": _uom(client),
        "unit_size": 20,
        "sds_id": sds["id"],
    })
    assert resp.status_code == 409
    assert resp.json()["status_code"] == "204"


def test_same_name_and_code_with_other_sds_is_allowed(client, make_sds, make_product):
    make_product(product_name="Acetone", product_code="ACE", sds_id=make_sds()["id"])
    other = make_product(product_name="Acetone", product_code="ACE", sds_id=make_sds()["id"])
    assert other["product_code"] == "ACE"


def test_duplicate_product_on_update(client, make_sds, make_product):
    sds = make_sds()
    make_product(product_name="Acetone", product_code="ACE", sds_id=sds["id"])
    second = make_product(product_name="Acetone", product_code="ACE-2", sds_id=sds["id"])

    resp = client.put(f"/api/products/{second['id']}", json={"product_code": "ACE"})
    assert resp.status_code == 409

    # saving a product unchanged is not a duplicate of itself
    same = client.put(f"/api/products/{second['id']}", json={"product_code": "ACE-2"})
    assert same.status_code == 200


def test_product_pagination(client, make_sds, make_product):
    sds = make_sds()
    for _ in range(23):
        make_product(sds_id=sds["id"])

    page = data_of(client.get("/api/products/all", params={"page": 3}))
    assert page["total"] == 23
    assert page["total_pages"] == 3
    assert len(page["products"]) == 3


def test_filter_products_by_supplier(client, make_supplier, make_sds, make_product):
    acme = make_supplier()
    other = make_supplier()
    make_product(product_name="From Acme", sds_id=make_sds(supplier_id=acme["id"])["id"])
    make_product(product_name="From Other", sds_id=make_sds(supplier_id=other["id"])["id"])

    result = data_of(client.get("/api/products/all", params={"supplier_id": acme["id"]}))
    assert [p["product_name"] for p in result["products"]] == ["From Acme"]


def test_product_hazards(client, make_product, master_data_id):
    product = make_product()
    health = master_data_id("HAZARD_TYPE", "Health")

    hazard = data_of(client.post(f"/api/products/{product['id']}/hazards", json={
        "hazard_type": health,
        "hazard": "Eye irritation",
        "control": "Wear safety glasses",
    }))
    assert hazard["hazard_type_name"] == "Health"

    hazards = data_of(client.get(f"/api/products/{product['id']}/hazards"))
    assert len(hazards) == 1

    # hazard_type must be a HAZARD_TYPE entry
    resp = client.post(f"/api/products/{product['id']}/hazards", json={
        "hazard_type": master_data_id("UOM", "L"),
        "hazard": "Spill",
        "control": "Bund",
    })
    assert resp.status_code == 400


def test_duplicate_copies_hazards(client, make_product, master_data_id):
    product = make_product(product_name="Bleach", product_code="BL-1")
    client.post(f"/api/products/{product['id']}/hazards", json={
        "hazard_type": master_data_id("HAZARD_TYPE", "Health"),
        "hazard": "Skin burns",
        "control": "Gloves",
    })

    copy = data_of(client.post(f"/api/products/{product['id']}/duplicate", json={"product_code": "BL-2"}))
    assert copy["product_name"] == "Bleach"
    assert copy["product_code"] == "BL-2"
    assert len(data_of(client.get(f"/api/products/{copy['id']}/hazards"))) == 1

    # identical copy collides with the source
    resp = client.post(f"/api/products/{product['id']}/duplicate", json={})
    assert resp.status_code == 409


def test_product_in_site_register_cannot_be_deleted(client, make_product, make_site_register):
    product = make_product()
    make_site_register(product_id=product["id"])

    resp = client.delete(f"/api/products/{product['id']}")
    assert resp.status_code == 409


def _uom(client):
    lookup = data_of(client.get("/api/master-data/lookup/UOM"))
    return next(item["id"] for item in lookup if item["name"] == "L")


@pytest.mark.parametrize("cleared", [
    {"sds_id": None, "uom_id": None, "unit_size": None},
    {"product_name": None},
    {"product_code": None},
    {"status": None},
])
def test_update_cannot_clear_required_fields(client, make_product, cleared):
    product = make_product()

    resp = client.put(f"/api/products/{product['id']}", json=cleared)
    assert resp.status_code == 422
    for field in cleared:
        assert field in resp.json()["message"]

    unchanged = data_of(client.get(f"/api/products/{product['id']}"))
    assert unchanged["sds_id"] == product["sds_id"]
    assert unchanged["uom_id"] == product["uom_id"]
    assert unchanged["unit_size"] == product["unit_size"]
    assert unchanged["product_name"] == product["product_name"]


def test_update_can_clear_optional_fields(client, make_product):
    product = make_product(brand_name="Acme")

    updated = data_of(client.put(f"/api/products/{product['id']}", json={"brand_name": None}))
    assert updated["brand_name"] == ""
    assert updated["sds_id"] == product["sds_id"]
