"""
Device Repository implementation with device-specific operations.
"""
from typing import Optional
from .base_repository import BaseRepository
from ..models import Device


class DeviceRepository(BaseRepository[Device]):
    """Repository for Device-specific operations."""

    def __init__(self, session=None):
        super().__init__(Device, session)

    def find_by_patient_id(self, patient_id: int) -> Optional[Device]:
        """Find the device owned by a patient."""
        return self.find_one_by(patient_id=patient_id)
