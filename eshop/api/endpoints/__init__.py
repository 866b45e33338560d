"""API routes. Everything except auth and health requires a bearer token."""

from fastapi import APIRouter, Depends

from eshop.api.endpoints import auth, departments, employees, health, orders, payments, products

protected = [Depends(auth.get_current_user)]

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(
    departments.router, prefix="/departments", tags=["departments"], dependencies=protected
)
router.include_router(
    employees.router, prefix="/employees", tags=["employees"], dependencies=protected
)
router.include_router(products.router, prefix="/products", tags=["products"], dependencies=protected)
router.include_router(orders.router, prefix="/orders", tags=["orders"], dependencies=protected)
router.include_router(payments.router, prefix="/payments", tags=["payments"], dependencies=protected)
