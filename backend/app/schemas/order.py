from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class OrderCreate(BaseModel):
    """Schema for creating an order."""
    customer_id: str = Field(min_length=1)
    product_ids: List[str] = Field(default_factory=list)
    total_amount: float = Field(default=0.0, ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "64f1a2b3c4d5e6f7a8b9c0d1",
                "product_ids": ["64f1a2b3c4d5e6f7a8b9c0d2"],
                "total_amount": 179.0
            }
        }


class OrderUpdate(BaseModel):
    """Schema for updating an order. Empty values are left unchanged."""
    customer_id: Optional[str] = None
    product_ids: Optional[List[str]] = None
    total_amount: Optional[float] = Field(default=None, ge=0)


class OrderResponse(BaseModel):
    """Schema for order response."""
    id: str
    customer_id: str
    product_ids: List[str]
    total_amount: float
    created_at: datetime

    class Config:
        from_attributes = True
