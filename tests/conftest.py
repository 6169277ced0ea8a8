import os

# must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from shared.core.database import Base, ComplianceSessionLocal, compliance_engine
from compliance_service.app.main import app
from compliance_service.app.models import MasterData, Likelihood, Consequence
from compliance_service.seed import seed_reference_data
from helpers import data_of


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=compliance_engine)
    Base.metadata.create_all(bind=compliance_engine)
    session = ComplianceSessionLocal()
    seed_reference_data(session)
    yield session
    session.close()


@pytest.fixture
def client(db):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def master_data_id(db):
    def lookup(category: str, label: str) -> str:
        row = db.query(MasterData.id).filter(
            MasterData.category == category, MasterData.label == label).one()
        return str(row.id)
    return lookup


@pytest.fixture
def risk_ids(db):
    """likelihood / consequence ids keyed by score."""
    likelihood = {r.score: r.id for r in db.query(Likelihood).all()}
    consequence = {r.score: r.id for r in db.query(Consequence).all()}
    return likelihood, consequence



@pytest.fixture
def make_supplier(client):
    counter = {"n": 0}

    def create(**overrides):
        counter["n"] += 1
        payload = {
            "supplier_name": f"Supplier {counter['n']:03d}",
            "contact_person": "Jane Citizen",
            "email": f"orders{counter['n']}@acme-chemicals.com.au",
            "address": "1 Industrial Way, Brisbane",
        }
        payload.update(overrides)
        return data_of(client.post("/api/suppliers/", json=payload))
    return create


@pytest.fixture
def make_sds(client, make_supplier):
    def create(**overrides):
        payload = {
            "product_name": "Acetone",
            "product_id": "ACE-100",
            "issue_date": "2023-01-01",
        }
        payload.update(overrides)
        if "supplier_id" not in payload:
            payload["supplier_id"] = make_supplier()["id"]
        return data_of(client.post("/api/sds/", json=payload))
    return create


@pytest.fixture
def make_product(client, make_sds, master_data_id):
    counter = {"n": 0}

    def create(**overrides):
        counter["n"] += 1
        payload = {
            "product_name": f"Product {counter['n']:03d}",
            "product_code": f"P-{counter['n']:03d}",
            "uom_id": master_data_id("UOM", "L"),
            "unit_size": 5,
        }
        payload.update(overrides)
        if "sds_id" not in payload:
            payload["sds_id"] = make_sds()["id"]
        return data_of(client.post("/api/products/", json=payload))
    return create


@pytest.fixture
def make_location(client, master_data_id):
    def create(name: str, parent_id: str = None, **overrides):
        payload = {
            "name": name,
            "type_id": master_data_id("LOCATION_TYPE", "Site"),
            "parent_location_id": parent_id,
        }
        payload.update(overrides)
        return data_of(client.post("/api/locations/", json=payload))
    return create


@pytest.fixture
def make_site_register(client, make_product, make_location):
    def create(**overrides):
        payload = dict(overrides)
        if "product_id" not in payload:
            payload["product_id"] = make_product()["id"]
        if "location_id" not in payload:
            payload["location_id"] = make_location("Main Store")["id"]
        payload.setdefault("current_stock_level", 10)
        return data_of(client.post("/api/site-registers/", json=payload))
    return create
