"""Payment resource: record a transaction against an order."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from eshop.models import TransactionDetail
from eshop.schemas.payment import PaymentRequest
from eshop.services.results import Result, not_found

logger = logging.getLogger(__name__)

PAYMENT_STATUS_SUCCESS = "SUCCESS"


def list_payments(db: Session) -> list[TransactionDetail]:
    return db.query(TransactionDetail).order_by(TransactionDetail.id).all()


def get_payment(db: Session, payment_id: int) -> Result[TransactionDetail]:
    payment = db.query(TransactionDetail).filter(TransactionDetail.id == payment_id).first()
    if payment is None:
        return not_found("Payment", payment_id)
    return Result.success(payment)


def do_payment(db: Session, body: PaymentRequest) -> TransactionDetail:
    """Record the payment as SUCCESS; no external gateway is involved."""
    transaction = TransactionDetail(
        order_id=body.order_id,
        amount=body.amount,
        reference_number=body.reference_number,
        payment_method=body.payment_method.value,
        payment_status=PAYMENT_STATUS_SUCCESS,
        payment_date=datetime.now(UTC),
    )
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    logger.info(
        "Payment recorded: transaction_id=%s order_id=%s", transaction.id, transaction.order_id
    )
    return transaction
