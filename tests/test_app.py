from __future__ import annotations
import pytest
from oneup.exceptions import ValidationError
from oneup.extensions import db
from oneup.models import Patient, PaymentMethod, Report
from oneup.utils.transaction import transactional


def test_health(client):
    rv = client.get("/api/health")
    assert rv.status_code == 200
    body = rv.get_json()
    assert body["status"] == "healthy"
    assert body["services"]["database"] == "healthy"


def test_metrics_counts(client, make_patient):
    make_patient()
    client.post("/api/oneup/v1/paymentmethod", json={"cardNumber": "4111"})
    rv = client.get("/api/metrics")
    assert rv.status_code == 200
    assert rv.get_json()["database"] == {"total_devices": 0, "total_patients": 1, "total_payment_methods": 1}


def test_docs_redirect(client):
    rv = client.get("/api/docs")
    assert rv.status_code == 302
    assert rv.headers["Location"].endswith("/apidocs")


def test_swagger_spec_lists_tags(client):
    rv = client.get("/apispec_1.json")
    assert rv.status_code == 200
    paths = rv.get_json()["paths"]
    assert "/api/oneup/v1/devices" in paths
    assert "/api/oneup/v1/paymentmethod" in paths


def test_unknown_route_and_method(client):
    rv = client.get("/api/oneup/v1/nothing")
    assert rv.status_code == 404
    assert rv.get_json()["code"] == "NOT_FOUND"
    rv = client.patch("/api/oneup/v1/devices")
    assert rv.status_code == 405
    assert rv.get_json()["code"] == "METHOD_NOT_ALLOWED"


def test_transactional_commits_on_success(app):
    @transactional()
    def write():
        db.session.add(PaymentMethod(card_number="1"))

    with app.app_context():
        write()
        db.session.remove()
        assert PaymentMethod.query.count() == 1


def test_transactional_rolls_back_on_error(app):
    @transactional()
    def write_then_fail():
        db.session.add(PaymentMethod(card_number="1"))
        db.session.flush()
        raise ValidationError("nope")

    with app.app_context():
        with pytest.raises(ValidationError):
            write_then_fail()
        assert PaymentMethod.query.count() == 0


def test_read_only_transaction_never_commits(app):
    @transactional(read_only=True)
    def sneaky_write():
        db.session.add(PaymentMethod(card_number="1"))
        db.session.flush()

    with app.app_context():
        sneaky_write()
        assert PaymentMethod.query.count() == 0


def test_report_belongs_to_patient(app):
    with app.app_context():
        patient = Patient(first_name="Ana")
        db.session.add(patient)
        db.session.flush()
        db.session.add(Report(patient_id=patient.id, description="weekly check"))
        db.session.commit()
        assert [r.description for r in db.session.get(Patient, patient.id).reports] == ["weekly check"]
