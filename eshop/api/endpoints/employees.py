"""Employee endpoints, including the employee + department composition."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from eshop.api.errors import unwrap
from eshop.core.database import get_db
from eshop.schemas.employee import (
    EmployeeDepartmentResponse,
    EmployeeRequest,
    EmployeeResponse,
)
from eshop.services import employees
from eshop.services.department_client import DepartmentClient

router = APIRouter()


def get_department_client(request: Request) -> DepartmentClient:
    return request.app.state.department_client


@router.get("", response_model=list[EmployeeResponse])
def list_employees(db: Annotated[Session, Depends(get_db)]) -> list[EmployeeResponse]:
    return [EmployeeResponse.model_validate(e) for e in employees.list_employees(db)]


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> EmployeeResponse:
    return EmployeeResponse.model_validate(unwrap(employees.get_employee(db, employee_id)))


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeRequest,
    db: Annotated[Session, Depends(get_db)],
) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employees.create_employee(db, body))


@router.get("/{employee_id}/department", response_model=EmployeeDepartmentResponse)
async def get_employee_with_department(
    employee_id: int,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    client: Annotated[DepartmentClient, Depends(get_department_client)],
) -> EmployeeDepartmentResponse:
    """
    Return the employee together with its department.

    The department is fetched from the department resource with the caller's
    bearer token. If that call fails the whole request fails with the
    department service's status and message.
    """
    result = await employees.get_employee_with_department(
        db,
        employee_id,
        client,
        authorization=request.headers.get("Authorization"),
    )
    return unwrap(result)
