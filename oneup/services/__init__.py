"""
Business logic service layer.
Provides high-level operations using repositories.
"""
from .base_service import BaseService
from .device_service import DeviceService
from .patient_service import PatientService
from .payment_method_service import PaymentMethodService
from .user_service import UserService

__all__ = [
    'BaseService',
    'DeviceService',
    'PatientService',
    'PaymentMethodService',
    'UserService'
]
