"""
Pydantic schemas for payment method records.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PaymentMethodSchema(BaseModel):
    """Request body for create and full-replace update.

    ``card_number`` stays optional here so blank-card checks report a single
    "Card Number is required" message.
    """

    card_number: Optional[str] = Field(None, alias="cardNumber")
    card_holder: Optional[str] = Field(None, alias="cardHolder")
    expiration_date: Optional[str] = Field(None, alias="expirationDate")

    class Config:
        populate_by_name = True
        extra = "ignore"


class PaymentMethodResponseSchema(BaseModel):
    id: int
    card_number: str = Field(..., alias="cardNumber")
    card_holder: Optional[str] = Field(None, alias="cardHolder")
    expiration_date: Optional[str] = Field(None, alias="expirationDate")

    class Config:
        from_attributes = True
        populate_by_name = True
