"""
Patient service - read-only access to externally managed patients.
"""
from __future__ import annotations

from typing import Optional

from ..models import Patient
from ..repositories import PatientRepository
from .base_service import BaseService


class PatientService(BaseService):
    logger_name = "services.patient"

    def __init__(self, patient_repo: Optional[PatientRepository] = None, session=None):
        super().__init__(session)
        self.patient_repo = patient_repo or PatientRepository(self.session)

    def get_patient_by_id(self, patient_id: int) -> Optional[Patient]:
        return self.patient_repo.get_by_id(patient_id)

    def get_patient_by_user_id(self, user_id: int) -> Optional[Patient]:
        return self.patient_repo.find_by_user_id(user_id)
