"""Department endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from eshop.api.errors import unwrap
from eshop.core.database import get_db
from eshop.schemas.department import DepartmentRequest, DepartmentResponse
from eshop.services import departments

router = APIRouter()


@router.get("", response_model=list[DepartmentResponse])
def list_departments(db: Annotated[Session, Depends(get_db)]) -> list[DepartmentResponse]:
    return [DepartmentResponse.model_validate(d) for d in departments.list_departments(db)]


@router.get("/{department_id}", response_model=DepartmentResponse)
def get_department(
    department_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DepartmentResponse:
    return DepartmentResponse.model_validate(unwrap(departments.get_department(db, department_id)))


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
def create_department(
    body: DepartmentRequest,
    db: Annotated[Session, Depends(get_db)],
) -> DepartmentResponse:
    return DepartmentResponse.model_validate(departments.create_department(db, body))
