from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(BaseModel):
    """Order model for MongoDB."""
    id: Optional[str] = Field(None, alias="_id")
    customer_id: str
    product_ids: List[str] = Field(default_factory=list)
    total_amount: float = Field(default=0.0, ge=0)
    created_at: datetime = Field(default_factory=_utcnow)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "customer_id": "64f1a2b3c4d5e6f7a8b9c0d1",
                "product_ids": ["64f1a2b3c4d5e6f7a8b9c0d2"],
                "total_amount": 179.0
            }
        }
