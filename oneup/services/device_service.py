"""
Device service - delegates device persistence to the repository layer.
"""
from __future__ import annotations

from typing import List, Optional

from ..exceptions import ResourceNotFoundError
from ..models import Device, Patient
from ..repositories import DeviceRepository
from .base_service import BaseService


class DeviceService(BaseService):
    """Device operations; no business rules beyond null-handling."""

    logger_name = "services.device"

    def __init__(self, device_repo: Optional[DeviceRepository] = None, session=None):
        super().__init__(session)
        self.device_repo = device_repo or DeviceRepository(self.session)

    def get_all_devices(self) -> List[Device]:
        return self.device_repo.get_all()

    def get_device_by_id(self, device_id: int) -> Device:
        """Get a device or raise ResourceNotFoundError."""
        device = self.device_repo.get_by_id(device_id)
        if device is None:
            raise ResourceNotFoundError(f"Device with id: {device_id} not found")
        return device

    def get_device_by_patient_id(self, patient_id: int) -> Optional[Device]:
        return self.device_repo.find_by_patient_id(patient_id)

    def get_patient_by_device_id(self, device_id: int) -> Optional[Patient]:
        """Return the device's patient, or None if the device or patient is absent."""
        device = self.device_repo.get_by_id(device_id)
        if device is None:
            self.logger.debug(f"Device {device_id} not found while resolving its patient")
            return None
        return device.patient

    def save_device(self, device: Device) -> Device:
        device = self.device_repo.save(device)
        self.logger.info(f"Saved device {device.id} for patient {device.patient_id}")
        return device

    def delete_device(self, device_id: int) -> None:
        """Delete a device; deleting a missing id is a no-op."""
        deleted = self.device_repo.delete_by_id(device_id)
        if deleted:
            self.logger.info(f"Deleted device {device_id}")
        else:
            self.logger.debug(f"Delete requested for missing device {device_id}")
