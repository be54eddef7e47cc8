"""支付方式 API（CRUD）。
- GET    /api/oneup/v1/paymentmethod
- GET    /api/oneup/v1/paymentmethod/<id>
- POST   /api/oneup/v1/paymentmethod { cardNumber, cardHolder?, expirationDate? }
- PUT    /api/oneup/v1/paymentmethod/<id>
- DELETE /api/oneup/v1/paymentmethod/<id>
"""
from __future__ import annotations
from typing import Any
from flask import Blueprint, jsonify, request
from ..exceptions import ValidationError
from ..models import PaymentMethod
from ..schemas import PaymentMethodResponseSchema, PaymentMethodSchema
from ..services import PaymentMethodService
from ..utils.transaction import transactional

bp = Blueprint("payment_methods", __name__, url_prefix="/api/oneup/v1")


def _payment_method_json(payment_method: PaymentMethod) -> dict[str, Any]:
    return PaymentMethodResponseSchema.model_validate(payment_method).model_dump(by_alias=True)


def _parse_body() -> PaymentMethodSchema:
    return PaymentMethodSchema.model_validate(request.get_json())


def validate_payment_method(payment_method: Any) -> None:
    """Raise ValidationError if the card number is missing or blank."""
    card_number = getattr(payment_method, "card_number", None)
    if card_number is None or not card_number.strip():
        raise ValidationError("Card Number is required")


@bp.route("/paymentmethod", methods=["GET"])
@transactional(read_only=True)
def get_payment_methods():
    """List all payment methods.
    ---
    tags:
      - PaymentMethods
    responses:
      200:
        description: All payment methods
    """
    return jsonify([_payment_method_json(p) for p in PaymentMethodService().get_all_payment_methods()])


@bp.route("/paymentmethod/<int:payment_method_id>", methods=["GET"])
@transactional(read_only=True)
def get_payment_method(payment_method_id: int):
    """Get a payment method by id; empty body when absent.
    ---
    tags:
      - PaymentMethods
    parameters:
      - name: payment_method_id
        in: path
        schema:
          type: integer
        required: true
    responses:
      200:
        description: The payment method, or an empty body
    """
    payment_method = PaymentMethodService().get_payment_method_by_id(payment_method_id)
    if payment_method is None:
        return "", 200
    return jsonify(_payment_method_json(payment_method))


@bp.route("/paymentmethod", methods=["POST"])
@transactional()
def create_payment_method():
    """Create a payment method.
    ---
    tags:
      - PaymentMethods
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            required: [cardNumber]
            properties:
              cardNumber:
                type: string
              cardHolder:
                type: string
              expirationDate:
                type: string
    responses:
      201:
        description: The created payment method
      400:
        description: Card number missing or blank
    """
    data = _parse_body()
    validate_payment_method(data)
    payment_method = PaymentMethodService().save_payment_method(PaymentMethod(**data.model_dump()))
    return jsonify(_payment_method_json(payment_method)), 201


@bp.route("/paymentmethod/<int:payment_method_id>", methods=["PUT"])
@transactional()
def update_payment_method(payment_method_id: int):
    """Replace a payment method.
    ---
    tags:
      - PaymentMethods
    parameters:
      - name: payment_method_id
        in: path
        schema:
          type: integer
        required: true
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            properties:
              cardNumber:
                type: string
              cardHolder:
                type: string
              expirationDate:
                type: string
    responses:
      200:
        description: The updated payment method
      400:
        description: Card number missing or blank
    """
    data = _parse_body()
    validate_payment_method(data)
    payment_method = PaymentMethodService().update_payment_method(
        payment_method_id, PaymentMethod(**data.model_dump())
    )
    return jsonify(_payment_method_json(payment_method))


@bp.route("/paymentmethod/<int:payment_method_id>", methods=["DELETE"])
@transactional()
def delete_payment_method(payment_method_id: int):
    """Delete a payment method by id.
    ---
    tags:
      - PaymentMethods
    parameters:
      - name: payment_method_id
        in: path
        schema:
          type: integer
        required: true
    responses:
      200:
        description: Deleted (no body)
    """
    PaymentMethodService().delete_payment_method(payment_method_id)
    return "", 200
