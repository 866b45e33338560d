"""Product resource: list, get by id, create."""

from sqlalchemy.orm import Session

from eshop.models import Product
from eshop.schemas.product import ProductRequest
from eshop.services.results import Result, not_found


def list_products(db: Session) -> list[Product]:
    return db.query(Product).order_by(Product.id).all()


def get_product(db: Session, product_id: int) -> Result[Product]:
    product = db.query(Product).filter(Product.id == product_id).first()
    if product is None:
        return not_found("Product", product_id)
    return Result.success(product)


def create_product(db: Session, body: ProductRequest) -> Product:
    product = Product(**body.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    return product
