from helpers import data_of


def test_create_and_get_supplier(client, make_supplier):
    supplier = make_supplier(supplier_name="Acme Chemicals")

    fetched = data_of(client.get(f"/api/suppliers/{supplier['id']}"))
    assert fetched["supplier_name"] == "Acme Chemicals"
    assert fetched["status"] == "ACTIVE"
    # nulls come back as empty strings
    assert fetched["phone_number"] == ""


def test_supplier_requires_valid_email(client):
    resp = client.post("/api/suppliers/", json={
        "supplier_name": "Broken",
        "contact_person": "Nobody",
        "email": "not-an-email",
        "address": "Nowhere",
    })
    assert resp.status_code == 422
    assert resp.json()["status_code"] == "202"


def test_supplier_list_is_paginated(client, make_supplier):
    for _ in range(23):
        make_supplier()

    first = data_of(client.get("/api/suppliers/all"))
    assert first["total"] == 23
    assert first["total_pages"] == 3
    assert len(first["suppliers"]) == 10

    last = data_of(client.get("/api/suppliers/all", params={"page": 3}))
    assert len(last["suppliers"]) == 3


def test_supplier_search_and_status_filter(client, make_supplier):
    make_supplier(supplier_name="Blue Solvents")
    make_supplier(supplier_name="Red Paints", status="INACTIVE")

    found = data_of(client.get("/api/suppliers/all", params={"search": "solv"}))
    assert [s["supplier_name"] for s in found["suppliers"]] == ["Blue Solvents"]

    inactive = data_of(client.get("/api/suppliers/all", params={"status": "INACTIVE"}))
    assert [s["supplier_name"] for s in inactive["suppliers"]] == ["Red Paints"]


def test_update_supplier(client, make_supplier):
    supplier = make_supplier()
    updated = data_of(client.put(f"/api/suppliers/{supplier['id']}", json={"phone_number": "07 3000 0000"}))
    assert updated["phone_number"] == "07 3000 0000"
    assert updated["supplier_name"] == supplier["supplier_name"]


def test_supplier_with_sds_cannot_be_deleted(client, make_supplier, make_sds):
    supplier = make_supplier()
    make_sds(supplier_id=supplier["id"])

    resp = client.delete(f"/api/suppliers/{supplier['id']}")
    assert resp.status_code == 409
    assert resp.json()["status_code"] == "206"
    assert client.get(f"/api/suppliers/{supplier['id']}").status_code == 200


def test_delete_supplier(client, make_supplier):
    supplier = make_supplier()
    deleted = data_of(client.delete(f"/api/suppliers/{supplier['id']}"))
    assert deleted["id"] == supplier["id"]
    assert client.get(f"/api/suppliers/{supplier['id']}").status_code == 404


def test_unknown_user_header_is_rejected(client):
    resp = client.post(
        "/api/suppliers/",
        json={
            "supplier_name": "Ghost",
            "contact_person": "Ghost",
            "email": "ghost@acme-chemicals.com.au",
            "address": "Nowhere",
        },
        headers={"X-User-Email": "nobody@acme-chemicals.com.au"},
    )
    assert resp.status_code == 401


def test_update_cannot_clear_required_fields(client, make_supplier):
    supplier = make_supplier()

    for field in ("supplier_name", "contact_person", "email", "address", "status"):
        resp = client.put(f"/api/suppliers/{supplier['id']}", json={field: None})
        assert resp.status_code == 422
        assert field in resp.json()["message"]

    assert data_of(client.get(f"/api/suppliers/{supplier['id']}"))["email"] == supplier["email"]
