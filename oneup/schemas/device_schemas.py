"""
Pydantic schemas for device-related operations.
"""

from typing import Optional

from pydantic import BaseModel, Field


class DeviceCreateSchema(BaseModel):
    """Schema for creating a new device. The patient comes from the URL path."""

    product_quantity: int = Field(
        0, alias="productQuantity", ge=-2**31, le=2**31 - 1, description="Quantity of product in the device"
    )

    class Config:
        populate_by_name = True
        extra = "ignore"


class DeviceResponseSchema(BaseModel):
    """Schema for device API responses. The patient is never echoed back."""

    id: int
    product_quantity: int = Field(..., alias="productQuantity")

    class Config:
        from_attributes = True
        populate_by_name = True


class PatientResponseSchema(BaseModel):
    """Schema for patient responses. The device back-reference is excluded."""

    id: int
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")

    class Config:
        from_attributes = True
        populate_by_name = True
