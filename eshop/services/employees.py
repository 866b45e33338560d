"""Employee resource, including the employee + department composition."""

from sqlalchemy.orm import Session

from eshop.models import Employee
from eshop.schemas.employee import (
    EmployeeDepartmentResponse,
    EmployeeRequest,
    EmployeeResponse,
)
from eshop.services.department_client import DepartmentClient
from eshop.services.results import Result, not_found


def list_employees(db: Session) -> list[Employee]:
    return db.query(Employee).order_by(Employee.id).all()


def get_employee(db: Session, employee_id: int) -> Result[Employee]:
    employee = db.query(Employee).filter(Employee.id == employee_id).first()
    if employee is None:
        return not_found("Employee", employee_id)
    return Result.success(employee)


def create_employee(db: Session, body: EmployeeRequest) -> Employee:
    employee = Employee(
        first_name=body.first_name,
        last_name=body.last_name,
        email=str(body.email),
        department_id=body.department_id,
    )
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


async def get_employee_with_department(
    db: Session,
    employee_id: int,
    client: DepartmentClient,
    authorization: str | None = None,
) -> Result[EmployeeDepartmentResponse]:
    """
    Load the employee, then fetch its department from the department resource.

    An unknown employee is a NOT_FOUND result. Any failure of the department
    call raises DownstreamServiceError; there is no employee-only fallback.
    """
    result = get_employee(db, employee_id)
    if not result.ok:
        return Result(error=result.error)
    employee = result.value
    department = await client.get_department(employee.department_id, authorization=authorization)
    return Result.success(
        EmployeeDepartmentResponse(
            employee=EmployeeResponse.model_validate(employee),
            department=department,
        )
    )
