"""Request/response schemas for the department resource."""

from pydantic import BaseModel, ConfigDict, Field


class DepartmentRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Department name")
    address: str = Field(..., min_length=1, max_length=1024, description="Department address")


class DepartmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
