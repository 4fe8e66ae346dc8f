from typing import Optional
from pydantic import BaseModel, Field


class Customer(BaseModel):
    """Customer model for MongoDB.

    `password_hash` is only set for customers created through registration.
    """
    id: Optional[str] = Field(None, alias="_id")
    name: str = ""
    email: str
    phone: str = ""
    password_hash: Optional[str] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "phone": "123456789"
            }
        }
