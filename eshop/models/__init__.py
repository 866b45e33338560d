"""SQLAlchemy ORM models."""

from eshop.models.base import Base
from eshop.models.commerce import Order, Product, TransactionDetail
from eshop.models.organization import Department, Employee
from eshop.models.user import Role, User, user_roles

__all__ = [
    "Base",
    "Department",
    "Employee",
    "Order",
    "Product",
    "Role",
    "TransactionDetail",
    "User",
    "user_roles",
]
