"""ORM models for the shop: products, orders and payment transactions."""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func

from eshop.models.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    category_id = Column(Integer, nullable=True, index=True)


class Order(Base):
    """Placed order. Only the CREATED step exists; status is never advanced here."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    amount = Column(Float, nullable=False)
    payment_method = Column(String(32), nullable=False)
    order_status = Column(String(32), nullable=False, default="CREATED")
    order_date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class TransactionDetail(Base):
    """One payment transaction recorded against an order."""

    __tablename__ = "transaction_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, nullable=False, index=True)
    payment_method = Column(String(32), nullable=False)
    reference_number = Column(String(255), nullable=False)
    payment_date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    payment_status = Column(String(32), nullable=False, default="SUCCESS")
    amount = Column(Float, nullable=False)
