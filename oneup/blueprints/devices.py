"""设备 API。
- GET    /api/oneup/v1/devices
- GET    /api/oneup/v1/devices/<id>
- GET    /api/oneup/v1/devices/<id>/patient
- GET    /api/oneup/v1/device/users/<user_id>
- POST   /api/oneup/v1/device/<patient_id> { productQuantity }
- DELETE /api/oneup/v1/device/<id>
"""
from __future__ import annotations
from typing import Any
from flask import Blueprint, jsonify, request
from sqlalchemy.exc import IntegrityError
from ..exceptions import ResourceNotFoundError, ValidationError
from ..models import Device
from ..schemas import DeviceCreateSchema, DeviceResponseSchema, PatientResponseSchema
from ..services import DeviceService, PatientService, UserService
from ..utils.transaction import transactional

bp = Blueprint("devices", __name__, url_prefix="/api/oneup/v1")


def _device_json(device: Device) -> dict[str, Any]:
    return DeviceResponseSchema.model_validate(device).model_dump(by_alias=True)


def validate_device(device: Device) -> None:
    """Raise ValidationError unless the device references a patient."""
    if device.patient is None:
        raise ValidationError("Patient is required")


@bp.route("/devices", methods=["GET"])
@transactional(read_only=True)
def get_all_devices():
    """List all devices.
    ---
    tags:
      - Devices
    responses:
      200:
        description: All devices, possibly empty
    """
    return jsonify([_device_json(d) for d in DeviceService().get_all_devices()])


@bp.route("/devices/<int:device_id>", methods=["GET"])
@transactional(read_only=True)
def get_device_by_id(device_id: int):
    """Get a device by id.
    ---
    tags:
      - Devices
    parameters:
      - name: device_id
        in: path
        schema:
          type: integer
        required: true
    responses:
      200:
        description: The device
      404:
        description: Device not found
    """
    return jsonify(_device_json(DeviceService().get_device_by_id(device_id)))


@bp.route("/devices/<int:device_id>/patient", methods=["GET"])
@transactional(read_only=True)
def get_patient_by_device_id(device_id: int):
    """Get the patient that owns a device.
    ---
    tags:
      - Devices
    parameters:
      - name: device_id
        in: path
        schema:
          type: integer
        required: true
    responses:
      200:
        description: The patient
      404:
        description: No patient for this device (empty body)
    """
    patient = DeviceService().get_patient_by_device_id(device_id)
    if patient is None:
        return "", 404
    return jsonify(PatientResponseSchema.model_validate(patient).model_dump(by_alias=True))


@bp.route("/device/users/<int:user_id>", methods=["GET"])
@transactional(read_only=True)
def get_device_by_user_id(user_id: int):
    """Get the device of the patient owned by a user.
    ---
    tags:
      - Devices
    parameters:
      - name: user_id
        in: path
        schema:
          type: integer
        required: true
    responses:
      200:
        description: The device
      404:
        description: User not found, or the user's patient has no device
    """
    user = UserService().get_user_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError(f"User with id: {user_id} not found")

    patient = PatientService().get_patient_by_user_id(user.id)
    device = DeviceService().get_device_by_patient_id(patient.id) if patient else None
    if device is None:
        raise ResourceNotFoundError(f"Device with user id: {user_id} not found")

    return jsonify(_device_json(device))


@bp.route("/device/<int:patient_id>", methods=["POST"])
@transactional()
def create_device(patient_id: int):
    """Create a device for an existing patient.
    ---
    tags:
      - Devices
    parameters:
      - name: patient_id
        in: path
        schema:
          type: integer
        required: true
    requestBody:
      content:
        application/json:
          schema:
            type: object
            properties:
              productQuantity:
                type: integer
    responses:
      201:
        description: The created device
      400:
        description: Patient not found or invalid body
    """
    data = DeviceCreateSchema.model_validate(request.get_json())

    patient = PatientService().get_patient_by_id(patient_id)
    if patient is None:
        raise ValidationError("Patient not found")
    if patient.device is not None:
        raise ValidationError(f"Patient with id: {patient_id} already has a device")

    device = Device(product_quantity=data.product_quantity)
    device.patient = patient
    validate_device(device)

    try:
        device = DeviceService().save_device(device)
    except IntegrityError:
        # a concurrent request linked a device to this patient first
        raise ValidationError(f"Patient with id: {patient_id} already has a device") from None
    return jsonify(_device_json(device)), 201


@bp.route("/device/<int:device_id>", methods=["DELETE"])
@transactional()
def delete_device(device_id: int):
    """Delete a device by id.
    ---
    tags:
      - Devices
    parameters:
      - name: device_id
        in: path
        schema:
          type: integer
        required: true
    responses:
      200:
        description: Confirmation message
    """
    DeviceService().delete_device(device_id)
    return jsonify(f"Device with id: {device_id} was deleted"), 200
