"""Request/response schemas for the order resource."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from eshop.schemas.payment import PaymentMethod


class OrderRequest(BaseModel):
    product_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=1)
    amount: float = Field(..., gt=0)
    payment_method: PaymentMethod


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    quantity: int
    amount: float
    payment_method: str
    order_status: str
    order_date: datetime
