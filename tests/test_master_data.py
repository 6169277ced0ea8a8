from helpers import data_of


def test_lookup_is_ordered_and_active_only(client):
    lookup = data_of(client.get("/api/master-data/lookup/LOCATION_TYPE"))
    assert [item["name"] for item in lookup] == ["Region", "District", "Site", "Building", "Room"]


def test_create_upper_cases_category(client):
    created = data_of(client.post("/api/master-data/", json={"category": "uom", "label": "Drum"}))
    assert created["category"] == "UOM"

    data_of(client.put(f"/api/master-data/{created['id']}", json={"status": "INACTIVE"}))
    names = [item["name"] for item in data_of(client.get("/api/master-data/lookup/UOM"))]
    assert "Drum" not in names


def test_list_filters_by_category(client):
    result = data_of(client.get("/api/master-data/all", params={"category": "PACKING_GROUP"}))
    assert result["total"] == 3
    assert [row["label"] for row in result["master_data"]] == ["I", "II", "III"]


def test_status_id_resolves_by_name(client):
    statuses = data_of(client.get("/api/master-data/status-lookup"))
    expected = next(s["id"] for s in statuses
                    if s["category"] == "SDS_Library" and s["status_name"] == "REQUESTED")

    resolved = client.get("/api/master-data/status-id", params={"status_name": "REQUESTED", "category": "SDS_Library"})
    assert resolved.json()["data"] == expected


def test_unknown_status_is_not_found(client):
    resp = client.get("/api/master-data/status-id", params={"status_name": "ARCHIVED", "category": "SDS_Library"})
    assert resp.status_code == 404


def test_update_cannot_clear_label(client):
    created = data_of(client.post("/api/master-data/", json={"category": "UOM", "label": "Drum"}))

    assert client.put(f"/api/master-data/{created['id']}", json={"label": None}).status_code == 422
    assert client.put(f"/api/master-data/{created['id']}", json={"sort_order": None}).status_code == 422

    updated = data_of(client.put(f"/api/master-data/{created['id']}", json={"value": None}))
    assert updated["label"] == "Drum"
