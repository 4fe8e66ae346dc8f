from typing import Optional
from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product model for MongoDB."""
    id: Optional[str] = Field(None, alias="_id")
    name: str
    price: float = Field(ge=0)
    stock: int = Field(default=0, ge=0)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "Mechanical Keyboard",
                "price": 89.5,
                "stock": 40
            }
        }
