"""Pydantic request/response schemas."""

from eshop.schemas.auth import LoginRequest, Principal, RegisterRequest
from eshop.schemas.department import DepartmentRequest, DepartmentResponse
from eshop.schemas.employee import (
    EmployeeDepartmentResponse,
    EmployeeRequest,
    EmployeeResponse,
)
from eshop.schemas.health import HealthResponse
from eshop.schemas.order import OrderRequest, OrderResponse
from eshop.schemas.payment import PaymentMethod, PaymentRequest, PaymentResponse
from eshop.schemas.product import ProductRequest, ProductResponse

__all__ = [
    "DepartmentRequest",
    "DepartmentResponse",
    "EmployeeDepartmentResponse",
    "EmployeeRequest",
    "EmployeeResponse",
    "HealthResponse",
    "LoginRequest",
    "OrderRequest",
    "OrderResponse",
    "PaymentMethod",
    "PaymentRequest",
    "PaymentResponse",
    "Principal",
    "ProductRequest",
    "ProductResponse",
    "RegisterRequest",
]
