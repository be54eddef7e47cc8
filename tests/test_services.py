"""Service-layer tests against in-memory repositories passed through constructors."""
from __future__ import annotations
import itertools
import pytest
from oneup.exceptions import ResourceNotFoundError
from oneup.models import Device, Patient, PaymentMethod
from oneup.services import DeviceService, PatientService, PaymentMethodService


class InMemoryRepository:
    def __init__(self):
        self.rows = {}
        self._ids = itertools.count(1)

    def get_by_id(self, entity_id):
        return self.rows.get(entity_id)

    def get_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def save(self, entity):
        if entity.id is None:
            entity.id = next(self._ids)
        self.rows[entity.id] = entity
        return entity

    def delete_by_id(self, entity_id):
        return self.rows.pop(entity_id, None) is not None

    def find_one_by(self, **kwargs):
        for row in self.rows.values():
            if all(getattr(row, k) == v for k, v in kwargs.items()):
                return row
        return None


class InMemoryDeviceRepository(InMemoryRepository):
    def find_by_patient_id(self, patient_id):
        return self.find_one_by(patient_id=patient_id)


class InMemoryPatientRepository(InMemoryRepository):
    def find_by_user_id(self, user_id):
        return self.find_one_by(user_id=user_id)


@pytest.fixture()
def device_service():
    return DeviceService(device_repo=InMemoryDeviceRepository())


def test_get_device_by_id_raises_not_found(device_service):
    with pytest.raises(ResourceNotFoundError, match="Device with id: 9 not found"):
        device_service.get_device_by_id(9)


def test_save_and_get_device(device_service):
    patient = Patient(id=1, first_name="Ana")
    saved = device_service.save_device(Device(product_quantity=2, patient_id=1, patient=patient))
    assert device_service.get_device_by_id(saved.id) is saved
    assert device_service.get_device_by_patient_id(1) is saved
    assert device_service.get_patient_by_device_id(saved.id) is patient
    assert device_service.get_all_devices() == [saved]


def test_get_patient_by_missing_device_is_none(device_service):
    assert device_service.get_patient_by_device_id(3) is None


def test_delete_missing_device_is_noop(device_service):
    device_service.delete_device(3)
    assert device_service.get_all_devices() == []


def test_patient_service_lookups():
    repo = InMemoryPatientRepository()
    repo.save(Patient(first_name="Ana", user_id=10))
    service = PatientService(patient_repo=repo)
    assert service.get_patient_by_id(1).first_name == "Ana"
    assert service.get_patient_by_user_id(10).id == 1
    assert service.get_patient_by_user_id(11) is None


def test_payment_method_update_replaces_by_id():
    service = PaymentMethodService(payment_method_repo=InMemoryRepository())
    original = service.save_payment_method(PaymentMethod(card_number="1111", card_holder="Ana"))
    updated = service.update_payment_method(original.id, PaymentMethod(card_number="2222"))
    assert updated.id == original.id
    assert service.get_payment_method_by_id(original.id).card_number == "2222"
    assert service.get_payment_method_by_id(original.id).card_holder is None
    assert len(service.get_all_payment_methods()) == 1


def test_payment_method_absent_is_none():
    service = PaymentMethodService(payment_method_repo=InMemoryRepository())
    assert service.get_payment_method_by_id(1) is None
    service.delete_payment_method(1)
