"""Order resource. Placing an order only records it with status CREATED."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from eshop.models import Order
from eshop.schemas.order import OrderRequest
from eshop.services.results import Result, not_found

logger = logging.getLogger(__name__)

ORDER_STATUS_CREATED = "CREATED"


def list_orders(db: Session) -> list[Order]:
    return db.query(Order).order_by(Order.id).all()


def get_order(db: Session, order_id: int) -> Result[Order]:
    order = db.query(Order).filter(Order.id == order_id).first()
    if order is None:
        return not_found("Order", order_id)
    return Result.success(order)


def place_order(db: Session, body: OrderRequest) -> Order:
    """Persist the order as CREATED and return it with its store-assigned id."""
    order = Order(
        product_id=body.product_id,
        quantity=body.quantity,
        amount=body.amount,
        payment_method=body.payment_method.value,
        order_status=ORDER_STATUS_CREATED,
        order_date=datetime.now(UTC),
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info("Order placed: order_id=%s product_id=%s", order.id, order.product_id)
    return order
