"""Order endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eshop.api.errors import unwrap
from eshop.core.database import get_db
from eshop.schemas.order import OrderRequest, OrderResponse
from eshop.services import orders

router = APIRouter()


@router.get("", response_model=list[OrderResponse])
def list_orders(db: Annotated[Session, Depends(get_db)]) -> list[OrderResponse]:
    return [OrderResponse.model_validate(o) for o in orders.list_orders(db)]


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> OrderResponse:
    return OrderResponse.model_validate(unwrap(orders.get_order(db, order_id)))


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def place_order(
    body: OrderRequest,
    db: Annotated[Session, Depends(get_db)],
) -> OrderResponse:
    """Record the order with status CREATED and return it with its id."""
    return OrderResponse.model_validate(orders.place_order(db, body))
