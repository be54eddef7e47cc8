"""
Repository pattern implementation for data access abstraction.
Provides a uniform interface for data operations across different entities.
"""

from .base_repository import BaseRepository
from .device_repository import DeviceRepository
from .patient_repository import PatientRepository
from .payment_method_repository import PaymentMethodRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "DeviceRepository",
    "PatientRepository",
    "PaymentMethodRepository",
    "UserRepository",
]
