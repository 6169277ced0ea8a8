from helpers import data_of


def _create_user(client, email, first="Alex", last="Nguyen", **extra):
    payload = {"email": email, "first_name": first, "last_name": last}
    payload.update(extra)
    return data_of(client.post("/api/users/", json=payload))


def test_create_user_with_roles(client):
    role = data_of(client.post("/api/users/roles", json={"role_name": "Safety Officer"}))
    user = _create_user(client, "Alex.Nguyen@acme-chemicals.com.au", role_ids=[role["id"]])

    assert user["email"] == "alex.nguyen@acme-chemicals.com.au"
    assert user["full_name"] == "Alex Nguyen"
    assert user["active"] == "active"
    assert [r["role_name"] for r in user["roles"]] == ["Safety Officer"]


def test_duplicate_email(client):
    _create_user(client, "pat@acme-chemicals.com.au")
    resp = client.post("/api/users/", json={
        "email": "PAT@acme-chemicals.com.au", "first_name": "Pat", "last_name": "Two"})
    assert resp.status_code == 409


def test_manager_and_reports(client):
    manager = _create_user(client, "boss@acme-chemicals.com.au", first="Robin", last="Boss")
    report = _create_user(client, "staff@acme-chemicals.com.au", manager_id=manager["id"])
    assert report["manager_name"] == "Robin Boss"

    resp = client.put(f"/api/users/{manager['id']}", json={"manager_id": manager["id"]})
    assert resp.status_code == 400

    data_of(client.delete(f"/api/users/{manager['id']}"))
    assert data_of(client.get(f"/api/users/{report['id']}"))["manager_id"] == ""


def test_assign_roles_replaces_set(client):
    admin = data_of(client.post("/api/users/roles", json={"role_name": "Admin"}))
    viewer = data_of(client.post("/api/users/roles", json={"role_name": "Viewer"}))
    user = _create_user(client, "roles@acme-chemicals.com.au", role_ids=[admin["id"]])

    updated = data_of(client.put(f"/api/users/{user['id']}/roles", json={"role_ids": [viewer["id"]]}))
    assert [r["role_name"] for r in updated["roles"]] == ["Viewer"]

    filtered = data_of(client.get("/api/users/all", params={"role_id": admin["id"]}))
    assert filtered["total"] == 0


def test_writes_record_acting_user(client):
    _create_user(client, "editor@acme-chemicals.com.au")
    resp = client.post(
        "/api/suppliers/",
        json={
            "supplier_name": "Audited Supplies",
            "contact_person": "Kim",
            "email": "kim@acme-chemicals.com.au",
            "address": "3 Dock St",
        },
        headers={"X-User-Email": "Editor@acme-chemicals.com.au"},
    )
    assert resp.status_code == 200


def test_update_cannot_clear_email_or_names(client):
    user = _create_user(client, "kim@acme-chemicals.com.au")

    for field in ("email", "first_name", "last_name", "active"):
        resp = client.put(f"/api/users/{user['id']}", json={field: None})
        assert resp.status_code == 422

    assert data_of(client.get(f"/api/users/{user['id']}"))["email"] == "kim@acme-chemicals.com.au"
