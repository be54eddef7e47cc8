from __future__ import annotations
import pytest
from oneup.blueprints.payment_methods import validate_payment_method
from oneup.exceptions import ValidationError
from oneup.extensions import db
from oneup.models import PaymentMethod
from oneup.schemas import PaymentMethodSchema

API = "/api/oneup/v1/paymentmethod"


def create(client, **fields):
    payload = {"cardNumber": "4111111111111111", "cardHolder": "Ana Torres", "expirationDate": "12/30"}
    payload.update(fields)
    return client.post(API, json=payload)


def test_create_and_get_round_trip(client):
    rv = create(client)
    assert rv.status_code == 201
    created = rv.get_json()
    assert created["cardNumber"] == "4111111111111111"

    rv = client.get(f"{API}/{created['id']}")
    assert rv.status_code == 200
    assert rv.get_json() == {
        "id": created["id"],
        "cardNumber": "4111111111111111",
        "cardHolder": "Ana Torres",
        "expirationDate": "12/30",
    }


@pytest.mark.parametrize("card_number", ["", "   ", None])
def test_create_rejects_blank_card_number(app, client, card_number):
    rv = create(client, cardNumber=card_number)
    assert rv.status_code == 400
    assert rv.get_json() == {"error": "Card Number is required", "code": "VALIDATION_ERROR"}
    with app.app_context():
        assert PaymentMethod.query.count() == 0


def test_create_rejects_missing_card_number(client):
    rv = client.post(API, json={"cardHolder": "Ana Torres"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Card Number is required"


def test_create_rejects_malformed_json(app, client):
    rv = client.post(API, data="{not json", content_type="application/json")
    assert rv.status_code == 400
    assert rv.get_json() == {"error": "Bad request", "code": "BAD_REQUEST"}
    with app.app_context():
        assert PaymentMethod.query.count() == 0


def test_update_rejects_non_object_body(client):
    rv = client.put(f"{API}/1", json=["4111"])
    assert rv.status_code == 400
    assert rv.get_json()["code"] == "VALIDATION_ERROR"


def test_list_payment_methods(client):
    assert client.get(API).get_json() == []
    create(client, cardNumber="1111")
    create(client, cardNumber="2222")
    rv = client.get(API)
    assert rv.status_code == 200
    assert [p["cardNumber"] for p in rv.get_json()] == ["1111", "2222"]


def test_get_missing_payment_method_is_empty_ok(client):
    rv = client.get(f"{API}/123")
    assert rv.status_code == 200
    assert rv.data == b""


def test_update_replaces_record(client):
    pm_id = create(client).get_json()["id"]
    rv = client.put(f"{API}/{pm_id}", json={"cardNumber": "5500000000000004"})
    assert rv.status_code == 200
    assert rv.get_json() == {"id": pm_id, "cardNumber": "5500000000000004", "cardHolder": None, "expirationDate": None}

    rv = client.get(f"{API}/{pm_id}")
    assert rv.get_json()["cardNumber"] == "5500000000000004"
    assert rv.get_json()["cardHolder"] is None
    assert len(client.get(API).get_json()) == 1


def test_update_rejects_blank_card_number(client):
    pm_id = create(client).get_json()["id"]
    rv = client.put(f"{API}/{pm_id}", json={"cardNumber": "  "})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Card Number is required"
    assert client.get(f"{API}/{pm_id}").get_json()["cardNumber"] == "4111111111111111"


def test_update_missing_id_creates_record(client):
    rv = client.put(f"{API}/50", json={"cardNumber": "4000"})
    assert rv.status_code == 200
    assert rv.get_json()["id"] == 50
    assert client.get(f"{API}/50").get_json()["cardNumber"] == "4000"


def test_delete_payment_method(app, client):
    pm_id = create(client).get_json()["id"]
    for _ in range(2):
        rv = client.delete(f"{API}/{pm_id}")
        assert rv.status_code == 200
        assert rv.data == b""
    with app.app_context():
        assert db.session.get(PaymentMethod, pm_id) is None


def test_validate_payment_method():
    validate_payment_method(PaymentMethodSchema(cardNumber="4111"))
    with pytest.raises(ValidationError, match="Card Number is required"):
        validate_payment_method(PaymentMethodSchema(cardNumber="\t"))
