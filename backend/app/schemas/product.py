from typing import Optional
from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a product."""
    name: str = Field(min_length=1)
    price: float = Field(gt=0)
    stock: int = Field(default=0, ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Mechanical Keyboard",
                "price": 89.5,
                "stock": 40
            }
        }


class ProductUpdate(BaseModel):
    """Schema for updating a product. Omitted fields are left unchanged."""
    name: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    stock: Optional[int] = Field(default=None, ge=0)


class ProductResponse(BaseModel):
    """Schema for product response."""
    id: str
    name: str
    price: float
    stock: int

    class Config:
        from_attributes = True
