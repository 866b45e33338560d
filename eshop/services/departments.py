"""Department resource: list, get by id, create."""

from sqlalchemy.orm import Session

from eshop.models import Department
from eshop.schemas.department import DepartmentRequest
from eshop.services.results import Result, not_found


def list_departments(db: Session) -> list[Department]:
    return db.query(Department).order_by(Department.id).all()


def get_department(db: Session, department_id: int) -> Result[Department]:
    department = db.query(Department).filter(Department.id == department_id).first()
    if department is None:
        return not_found("Department", department_id)
    return Result.success(department)


def create_department(db: Session, body: DepartmentRequest) -> Department:
    department = Department(name=body.name, address=body.address)
    db.add(department)
    db.commit()
    db.refresh(department)
    return department
