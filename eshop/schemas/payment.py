"""Request/response schemas for payment transactions."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PaymentMethod(str, Enum):
    CASH = "CASH"
    PAYPAL = "PAYPAL"
    DEBIT_CARD = "DEBIT_CARD"
    CREDIT_CARD = "CREDIT_CARD"
    APPLE_PAY = "APPLE_PAY"


class PaymentRequest(BaseModel):
    order_id: int = Field(..., ge=1)
    amount: float = Field(..., gt=0)
    reference_number: str = Field(..., min_length=1, max_length=255)
    payment_method: PaymentMethod


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    amount: float
    reference_number: str
    payment_method: str
    payment_status: str
    payment_date: datetime
