"""
Patient Repository implementation.
Patients are created elsewhere; this core only reads them.
"""
from typing import Optional
from .base_repository import BaseRepository
from ..models import Patient


class PatientRepository(BaseRepository[Patient]):
    """Repository for Patient lookups."""

    def __init__(self, session=None):
        super().__init__(Patient, session)

    def find_by_user_id(self, user_id: int) -> Optional[Patient]:
        """Find the patient record owned by a user account."""
        return self.find_one_by(user_id=user_id)
