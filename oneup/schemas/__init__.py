"""
Pydantic schemas for data validation and serialization.
Provides type-safe data models for API requests and responses.
"""
from .device_schemas import (
    DeviceCreateSchema,
    DeviceResponseSchema,
    PatientResponseSchema
)
from .payment_method_schemas import (
    PaymentMethodSchema,
    PaymentMethodResponseSchema
)

__all__ = [
    # Device schemas
    'DeviceCreateSchema',
    'DeviceResponseSchema',
    'PatientResponseSchema',

    # Payment method schemas
    'PaymentMethodSchema',
    'PaymentMethodResponseSchema'
]
