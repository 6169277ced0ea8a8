from helpers import data_of


def test_full_path_follows_parents(make_location):
    region = make_location("Queensland")
    site = make_location("Brisbane Depot", parent_id=region["id"])
    room = make_location("Chemical Store", parent_id=site["id"])

    assert region["full_path"] == "Queensland"
    assert room["full_path"] == "Queensland > Brisbane Depot > Chemical Store"
    assert room["parent_name"] == "Brisbane Depot"


def test_rename_updates_descendant_paths(client, make_location):
    region = make_location("Queensland")
    site = make_location("Brisbane Depot", parent_id=region["id"])
    room = make_location("Chemical Store", parent_id=site["id"])

    data_of(client.put(f"/api/locations/{region['id']}", json={"name": "QLD"}))

    assert data_of(client.get(f"/api/locations/{site['id']}"))["full_path"] == "QLD > Brisbane Depot"
    assert data_of(client.get(f"/api/locations/{room['id']}"))["full_path"] == "QLD > Brisbane Depot > Chemical Store"


def test_move_location(client, make_location):
    north = make_location("North")
    south = make_location("South")
    site = make_location("Depot", parent_id=north["id"])

    moved = data_of(client.put(f"/api/locations/{site['id']}", json={"parent_location_id": south["id"]}))
    assert moved["full_path"] == "South > Depot"


def test_cannot_move_under_own_descendant(client, make_location):
    region = make_location("Queensland")
    site = make_location("Brisbane Depot", parent_id=region["id"])

    resp = client.put(f"/api/locations/{region['id']}", json={"parent_location_id": site["id"]})
    assert resp.status_code == 400

    resp = client.put(f"/api/locations/{region['id']}", json={"parent_location_id": region["id"]})
    assert resp.status_code == 400


def test_unknown_parent_is_not_found(client, master_data_id):
    resp = client.post("/api/locations/", json={
        "name": "Orphan",
        "type_id": master_data_id("LOCATION_TYPE", "Site"),
        "parent_location_id": "6f1c1c1e-0000-4000-8000-000000000000",
    })
    assert resp.status_code == 404


def test_type_must_be_location_type(client, master_data_id):
    resp = client.post("/api/locations/", json={
        "name": "Bad",
        "type_id": master_data_id("UOM", "L"),
    })
    assert resp.status_code == 400


def test_hierarchy_and_tree(client, make_location):
    region = make_location("Queensland")
    site = make_location("Brisbane Depot", parent_id=region["id"])
    room = make_location("Chemical Store", parent_id=site["id"])
    make_location("Victoria")

    hierarchy = data_of(client.get(f"/api/locations/{region['id']}/hierarchy"))
    assert hierarchy["location_ids"][0] == region["id"]
    assert set(hierarchy["location_ids"]) == {region["id"], site["id"], room["id"]}

    tree = data_of(client.get("/api/locations/tree"))
    assert [node["name"] for node in tree] == ["Queensland", "Victoria"]
    assert tree[0]["children"][0]["children"][0]["name"] == "Chemical Store"
    assert tree[1]["children"] == []


def test_location_with_children_cannot_be_deleted(client, make_location):
    region = make_location("Queensland")
    site = make_location("Brisbane Depot", parent_id=region["id"])

    assert client.delete(f"/api/locations/{region['id']}").status_code == 409
    data_of(client.delete(f"/api/locations/{site['id']}"))
    data_of(client.delete(f"/api/locations/{region['id']}"))


def test_storage_lookup(client, make_location, master_data_id):
    make_location("Office")
    make_location("Flammables Cabinet", is_storage_location=True,
                  storage_type_id=master_data_id("STORAGE_TYPE", "Flammable Cabinet"))

    lookup = data_of(client.get("/api/locations/lookup", params={"storage_only": True}))
    assert [item["name"] for item in lookup] == ["Flammables Cabinet"]


def test_update_cannot_clear_name_or_type(client, make_location):
    site = make_location("Brisbane Plant")

    for cleared in ({"name": None}, {"type_id": None}, {"is_storage_location": None}):
        resp = client.put(f"/api/locations/{site['id']}", json=cleared)
        assert resp.status_code == 422

    unchanged = data_of(client.get(f"/api/locations/{site['id']}"))
    assert unchanged["name"] == "Brisbane Plant"
    assert unchanged["type_id"] == site["type_id"]


def test_null_parent_moves_location_to_root(client, make_location):
    site = make_location("Brisbane Plant")
    store = make_location("Chemical Store", parent_id=site["id"])

    moved = data_of(client.put(f"/api/locations/{store['id']}", json={"parent_location_id": None}))
    assert moved["full_path"] == "Chemical Store"
    assert moved["parent_location_id"] == ""
