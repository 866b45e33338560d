"""Request/response schemas for the employee resource and its department composition."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from eshop.schemas.department import DepartmentResponse


class EmployeeRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    department_id: int = Field(..., ge=1, description="Id of the employee's department")


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    department_id: int


class EmployeeDepartmentResponse(BaseModel):
    """Employee merged with the department fetched from the department resource."""

    employee: EmployeeResponse
    department: DepartmentResponse
