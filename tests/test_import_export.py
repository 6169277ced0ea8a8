from helpers import data_of


def _supplier_row(name, email="sales@acme-chemicals.com.au", **extra):
    row = {
        "supplier_name": name,
        "contact_person": "Sam Lee",
        "email": email,
        "address": "2 Harbour Rd",
    }
    row.update(extra)
    return row


def test_import_skips_bad_rows(client):
    rows = [
        _supplier_row("Acme Chemicals"),
        _supplier_row("Broken Email Pty", email="not-an-email"),
        _supplier_row("Coastal Fuels"),
    ]
    result = data_of(client.post("/api/import/suppliers", json=rows))

    assert result["created"] == 2
    assert result["failed"] == 1
    assert result["errors"][0]["row"] == 2
    assert "email" in result["errors"][0]["message"]

    suppliers = data_of(client.get("/api/suppliers/all"))
    assert sorted(s["supplier_name"] for s in suppliers["suppliers"]) == ["Acme Chemicals", "Coastal Fuels"]


def test_import_updates_existing_supplier(client, make_supplier):
    make_supplier(supplier_name="Acme Chemicals")

    result = data_of(client.post("/api/import/suppliers", json=[
        _supplier_row("acme chemicals", phone_number="1300 000 000")]))
    assert (result["created"], result["updated"]) == (0, 1)

    suppliers = data_of(client.get("/api/suppliers/all"))
    assert suppliers["total"] == 1
    assert suppliers["suppliers"][0]["phone_number"] == "1300 000 000"


def test_import_locations_by_path(client):
    rows = [
        {"name": "Queensland", "location_type": "Region"},
        {"name": "Brisbane Depot", "location_type": "Site", "parent_path": "Queensland"},
        {"name": "Lost Site", "location_type": "Site", "parent_path": "Atlantis"},
        {"name": "Store", "location_type": "Spaceport", "parent_path": "Queensland"},
    ]
    result = data_of(client.post("/api/import/locations", json=rows))
    assert result["created"] == 2
    assert [e["row"] for e in result["errors"]] == [3, 4]

    locations = data_of(client.get("/api/locations/all"))
    assert [l["full_path"] for l in locations["locations"]] == ["Queensland", "Queensland > Brisbane Depot"]


def test_import_master_data(client):
    result = data_of(client.post("/api/import/master_data", json=[
        {"category": "uom", "label": "Drum"},
        {"category": "UOM", "label": "L", "sort_order": 9},
    ]))
    assert (result["created"], result["updated"]) == (1, 1)

    lookup = data_of(client.get("/api/master-data/lookup/UOM"))
    assert lookup[-1]["name"] == "L"


def test_unknown_import_type(client):
    assert client.post("/api/import/widgets", json=[]).status_code == 400


def test_export_suppliers_uses_friendly_headers(client, make_supplier):
    for n in range(12):
        make_supplier(supplier_name=f"Export {n:02d}")

    export = data_of(client.get("/api/export/", params={"type": "suppliers"}))
    assert export["filename"].startswith("suppliers_export_")
    # exports are not paginated
    assert len(export["data"]) == 12
    first = export["data"][0]
    assert list(first.keys()) == ["Supplier Name", "Contact Person", "Email", "Phone", "Address", "Status"]
    assert first["Phone"] == ""


def test_export_products_honours_filters(client, make_supplier, make_sds, make_product):
    acme = make_supplier()
    make_product(product_name="Kept", sds_id=make_sds(supplier_id=acme["id"])["id"])
    make_product(product_name="Filtered", sds_id=make_sds()["id"])

    export = data_of(client.get("/api/export/", params={"type": "products", "supplier_id": acme["id"]}))
    assert [row["Product Name"] for row in export["data"]] == ["Kept"]


def test_unknown_export_type(client):
    assert client.get("/api/export/", params={"type": "widgets"}).status_code == 400
