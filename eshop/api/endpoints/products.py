"""Product endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eshop.api.errors import unwrap
from eshop.core.database import get_db
from eshop.schemas.product import ProductRequest, ProductResponse
from eshop.services import products

router = APIRouter()


@router.get("", response_model=list[ProductResponse])
def list_products(db: Annotated[Session, Depends(get_db)]) -> list[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in products.list_products(db)]


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    return ProductResponse.model_validate(unwrap(products.get_product(db, product_id)))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def add_product(
    body: ProductRequest,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    return ProductResponse.model_validate(products.create_product(db, body))
