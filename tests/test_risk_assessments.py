from compliance_service.app.crud.risk_assessments.risk_reference_crud import (
    lookup_risk_score, resolve_risk_fields)
from helpers import data_of


def test_lookup_hit_scores_likelihood_times_consequence(db, risk_ids):
    likelihood, consequence = risk_ids

    score = lookup_risk_score(db, likelihood[3], consequence[4])
    assert score.found is True
    assert score.risk_score == 12
    assert score.risk_level == "High"
    assert score.risk_label == "High (12)"


def test_lookup_miss_returns_empty_score(db, risk_ids):
    likelihood, _ = risk_ids

    score = lookup_risk_score(db, likelihood[1], 9999)
    assert score.found is False
    assert score.risk_score is None


def test_resolve_risk_fields(db, risk_ids):
    likelihood, consequence = risk_ids

    fields = resolve_risk_fields(db, likelihood[5], consequence[5])
    assert fields["likelihood_text"] == "Almost Certain"
    assert fields["consequence_text"] == "Catastrophic"
    assert fields["risk_score_int"] == 25
    assert fields["risk_level_text"] == "Extreme"

    empty = resolve_risk_fields(db, None, consequence[1])
    assert empty["risk_score_id"] is None
    assert empty["consequence_text"] == "Insignificant"


def test_risk_matrix_endpoint(client):
    matrix = data_of(client.get("/api/risk-assessments/risk-matrix"))
    assert len(matrix) == 25
    assert matrix[0]["risk_score"] == 1
    assert matrix[-1]["risk_score"] == 25


def test_risk_score_endpoint(client, risk_ids):
    likelihood, consequence = risk_ids
    score = data_of(client.get("/api/risk-assessments/risk-score", params={
        "likelihood_id": likelihood[2], "consequence_id": consequence[2]}))
    assert score["risk_score"] == 4
    assert score["risk_level"] == "Low"


def _product_with_hazards(client, make_product, master_data_id, count=2):
    product = make_product()
    for n in range(count):
        data_of(client.post(f"/api/products/{product['id']}/hazards", json={
            "hazard_type": master_data_id("HAZARD_TYPE", "Health"),
            "hazard": f"Hazard {n}",
            "control": f"Control {n}",
        }))
    return product


def test_generate_hazards_is_idempotent(client, make_product, make_site_register, master_data_id):
    product = _product_with_hazards(client, make_product, master_data_id)
    register = make_site_register(product_id=product["id"])
    assessment = data_of(client.post("/api/risk-assessments/", json={
        "site_register_record_id": register["id"]}))
    assert assessment["hazards"] == []

    first = data_of(client.post(f"/api/risk-assessments/{assessment['id']}/generate-hazards"))
    assert first["added"] == 2
    assert {h["source"] for h in first["hazards"]} == {"Product"}
    assert all(h["control_in_place"] is False for h in first["hazards"])

    second = data_of(client.post(f"/api/risk-assessments/{assessment['id']}/generate-hazards"))
    assert second["added"] == 0

    hazards = data_of(client.get(f"/api/risk-assessments/{assessment['id']}/hazards"))
    assert len(hazards) == 2


def test_create_with_auto_generated_hazards(client, make_product, make_site_register, master_data_id, risk_ids):
    likelihood, consequence = risk_ids
    product = _product_with_hazards(client, make_product, master_data_id, count=3)
    register = make_site_register(product_id=product["id"])

    assessment = data_of(client.post("/api/risk-assessments/", json={
        "site_register_record_id": register["id"],
        "risk_assessment_date": "2026-01-15",
        "overall_likelihood_id": likelihood[4],
        "overall_consequence_id": consequence[3],
        "auto_generate_hazards": True,
    }))
    assert len(assessment["hazards"]) == 3
    assert assessment["overall_risk_score_int"] == 12
    assert assessment["overall_risk_level_text"] == "High"


def test_manual_hazard_scores(client, make_site_register, risk_ids):
    likelihood, consequence = risk_ids
    register = make_site_register()
    assessment = data_of(client.post("/api/risk-assessments/", json={
        "site_register_record_id": register["id"]}))

    hazard = data_of(client.post(f"/api/risk-assessments/{assessment['id']}/hazards", json={
        "hazard": "Splash while decanting",
        "control": "Face shield",
        "likelihood_id": likelihood[2],
        "consequence_id": consequence[3],
    }))
    assert hazard["source"] == "Manual"
    assert hazard["risk_score_int"] == 6
    assert hazard["hazard_type"] == "Health"

    updated = data_of(client.put(
        f"/api/risk-assessments/{assessment['id']}/hazards/{hazard['id']}",
        json={"likelihood_id": 9999}))
    # unmatched pair clears the score
    assert updated["risk_score_int"] == ""
    assert updated["likelihood_text"] == ""


def test_delete_assessment_removes_hazards(client, make_product, make_site_register, master_data_id):
    product = _product_with_hazards(client, make_product, master_data_id)
    register = make_site_register(product_id=product["id"])
    assessment = data_of(client.post("/api/risk-assessments/", json={
        "site_register_record_id": register["id"], "auto_generate_hazards": True}))

    data_of(client.delete(f"/api/risk-assessments/{assessment['id']}"))
    assert client.get(f"/api/risk-assessments/{assessment['id']}").status_code == 404
    # register is free to go once its assessment is gone
    data_of(client.delete(f"/api/site-registers/{register['id']}"))


def test_update_cannot_detach_site_register(client, make_site_register, risk_ids):
    likelihood, consequence = risk_ids
    register = make_site_register()
    assessment = data_of(client.post("/api/risk-assessments/", json={
        "site_register_record_id": register["id"],
        "overall_likelihood_id": likelihood[2],
        "overall_consequence_id": consequence[2],
    }))
    url = f"/api/risk-assessments/{assessment['id']}"

    resp = client.put(url, json={"site_register_record_id": None})
    assert resp.status_code == 422

    # optional scores can still be cleared
    cleared = data_of(client.put(url, json={"overall_likelihood_id": None}))
    assert cleared["site_register_record_id"] == register["id"]
    assert cleared["overall_risk_score_id"] == ""
