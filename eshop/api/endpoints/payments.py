"""Payment endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eshop.api.errors import unwrap
from eshop.core.database import get_db
from eshop.schemas.payment import PaymentRequest, PaymentResponse
from eshop.services import payments

router = APIRouter()


@router.get("", response_model=list[PaymentResponse])
def list_payments(db: Annotated[Session, Depends(get_db)]) -> list[PaymentResponse]:
    return [PaymentResponse.model_validate(p) for p in payments.list_payments(db)]


@router.get("/{payment_id}", response_model=PaymentResponse)
def get_payment(
    payment_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> PaymentResponse:
    return PaymentResponse.model_validate(unwrap(payments.get_payment(db, payment_id)))


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def do_payment(
    body: PaymentRequest,
    db: Annotated[Session, Depends(get_db)],
) -> PaymentResponse:
    """Record a successful payment transaction for an order."""
    return PaymentResponse.model_validate(payments.do_payment(db, body))
