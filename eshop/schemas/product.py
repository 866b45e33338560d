"""Request/response schemas for the product resource."""

from pydantic import BaseModel, ConfigDict, Field


class ProductRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=10_000)
    price: float = Field(..., ge=0)
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    category_id: int | None = Field(default=None, ge=1)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    price: float
    quantity: int
    category_id: int | None = None
