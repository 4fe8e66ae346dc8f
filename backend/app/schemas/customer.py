from typing import Optional
from pydantic import BaseModel, EmailStr


class CustomerCreate(BaseModel):
    """Schema for creating a customer."""
    name: str
    email: EmailStr
    phone: str = ""


class CustomerUpdate(BaseModel):
    """Schema for updating a customer. Omitted fields are left unchanged."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None


class CustomerResponse(BaseModel):
    """Schema for customer response. Never exposes the password hash."""
    id: str
    name: str
    email: str
    phone: str = ""

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "64f1a2b3c4d5e6f7a8b9c0d1",
                "name": "John Doe",
                "email": "john@example.com",
                "phone": "123456789"
            }
        }
