from uuid import uuid4

from helpers import data_of


def _code_id(client, code):
    return next(c["ghs_code_id"] for c in data_of(client.get("/api/ghs/codes")) if c["ghs_code"] == code)


def _classification(client, hazard_class, category="Category 1", **extra):
    payload = {"hazard_class": hazard_class, "hazard_category": category}
    payload.update(extra)
    return data_of(client.post("/api/ghs/classifications", json=payload))


def test_seeded_codes_and_search(client):
    codes = data_of(client.get("/api/ghs/codes"))
    assert [c["ghs_code"] for c in codes][:3] == ["GHS01", "GHS02", "GHS03"]
    assert len(codes) == 9

    found = data_of(client.get("/api/ghs/codes", params={"search": "ghs05"}))
    assert [c["ghs_code"] for c in found] == ["GHS05"]


def test_create_code_is_upper_cased_and_unique(client):
    created = data_of(client.post("/api/ghs/codes", json={"ghs_code": "ghs10"}))
    assert created["ghs_code"] == "GHS10"

    assert client.post("/api/ghs/codes", json={"ghs_code": "GHS10"}).status_code == 409


def test_update_code(client):
    code_id = _code_id(client, "GHS02")

    updated = data_of(client.put(f"/api/ghs/codes/{code_id}",
                                 json={"pictogram_url": "/pictograms/flame.png"}))
    assert updated["ghs_code"] == "GHS02"
    assert updated["pictogram_url"] == "/pictograms/flame.png"

    clash = client.put(f"/api/ghs/codes/{code_id}", json={"ghs_code": "ghs01"})
    assert clash.status_code == 409

    cleared = client.put(f"/api/ghs/codes/{code_id}", json={"ghs_code": None})
    assert cleared.status_code == 422


def test_delete_code(client):
    unused = _code_id(client, "GHS09")
    data_of(client.delete(f"/api/ghs/codes/{unused}"))
    assert "GHS09" not in [c["ghs_code"] for c in data_of(client.get("/api/ghs/codes"))]

    used = _code_id(client, "GHS02")
    _classification(client, "Flammable liquids", ghs_code_id=used)
    resp = client.delete(f"/api/ghs/codes/{used}")
    assert resp.status_code == 409
    assert resp.json()["status_code"] == "206"

    assert client.delete(f"/api/ghs/codes/{uuid4()}").status_code == 404


def test_hazard_statements(client):
    data_of(client.post("/api/ghs/hazard-statements", json={
        "hazard_statement_code": "H225", "hazard_statement_text": "Highly flammable liquid and vapour"}))
    data_of(client.post("/api/ghs/hazard-statements", json={
        "hazard_statement_code": "H301", "hazard_statement_text": "Toxic if swallowed"}))

    statements = data_of(client.get("/api/ghs/hazard-statements"))
    assert [s["hazard_statement_code"] for s in statements] == ["H225", "H301"]

    found = data_of(client.get("/api/ghs/hazard-statements", params={"search": "swallowed"}))
    assert [s["hazard_statement_code"] for s in found] == ["H301"]

    again = client.post("/api/ghs/hazard-statements", json={
        "hazard_statement_code": "H225", "hazard_statement_text": "Duplicate"})
    assert again.status_code == 409


def test_precautionary_statements_filter_by_type(client):
    data_of(client.post("/api/ghs/precautionary-statements", json={
        "code": "P210", "statement": "Keep away from heat.", "type": "Prevention"}))
    data_of(client.post("/api/ghs/precautionary-statements", json={
        "code": "P403", "statement": "Store in a well-ventilated place.", "type": "Storage"}))

    storage = data_of(client.get("/api/ghs/precautionary-statements", params={"type": "Storage"}))
    assert [s["code"] for s in storage] == ["P403"]

    both = data_of(client.get("/api/ghs/precautionary-statements", params={"type": "Storage,Prevention"}))
    assert [s["code"] for s in both] == ["P210", "P403"]

    bad = client.post("/api/ghs/precautionary-statements", json={
        "code": "P999", "statement": "Unknown", "type": "Sometimes"})
    assert bad.status_code == 422


def test_classification_list_pages_and_searches(client):
    statement = data_of(client.post("/api/ghs/hazard-statements", json={
        "hazard_statement_code": "H290", "hazard_statement_text": "May be corrosive to metals"}))
    for n in range(1, 12):
        _classification(client, f"Hazard class {n:02d}")
    _classification(client, "Corrosive to metals", hazard_statement_id=statement["hazard_statement_id"],
                    ghs_code_id=_code_id(client, "GHS05"), signal_word="Warning")

    first = data_of(client.get("/api/ghs/classifications", params={"page_size": 5}))
    assert first["total"] == 12
    assert first["total_pages"] == 3
    assert len(first["classifications"]) == 5

    last = data_of(client.get("/api/ghs/classifications", params={"page": 3, "page_size": 5}))
    assert len(last["classifications"]) == 2

    by_statement = data_of(client.get("/api/ghs/classifications", params={"search": "H290"}))
    assert by_statement["total"] == 1
    row = by_statement["classifications"][0]
    assert row["ghs_code"] == "GHS05"
    assert row["hazard_statement_text"] == "May be corrosive to metals"

    by_signal = data_of(client.get("/api/ghs/classifications", params={"signal_word": "Warning"}))
    assert [r["hazard_class"] for r in by_signal["classifications"]] == ["Corrosive to metals"]


def test_update_classification(client):
    classification = _classification(client, "Acute toxicity (oral)", category="Category 4")
    url = f"/api/ghs/classifications/{classification['hazard_classification_id']}"
    assert classification["signal_word"] == "No Signal Word"

    updated = data_of(client.put(url, json={
        "hazard_category": "Category 3",
        "signal_word": "Danger",
        "ghs_code_id": _code_id(client, "GHS06"),
    }))
    assert updated["hazard_category"] == "Category 3"
    assert updated["signal_word"] == "Danger"
    assert updated["ghs_code"] == "GHS06"
    assert updated["hazard_class"] == "Acute toxicity (oral)"

    assert client.put(url, json={"hazard_class": None}).status_code == 422
    assert client.put(url, json={"signal_word": None}).status_code == 422
    assert client.put(url, json={"ghs_code_id": str(uuid4())}).status_code == 404

    assert data_of(client.get(url))["hazard_category"] == "Category 3"


def test_unknown_classification_is_not_found(client):
    assert client.get(f"/api/ghs/classifications/{uuid4()}").status_code == 404
    assert client.delete(f"/api/ghs/classifications/{uuid4()}").status_code == 404
