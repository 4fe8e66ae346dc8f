from pydantic import BaseModel, EmailStr, Field

from app.schemas.customer import CustomerResponse


class RegisterRequest(BaseModel):
    """Register request schema."""
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    phone: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "password": "strongpassword123",
                "phone": "123456789"
            }
        }


class LoginRequest(BaseModel):
    """Login request schema."""
    email: EmailStr
    password: str

    class Config:
        json_schema_extra = {
            "example": {
                "email": "john@example.com",
                "password": "strongpassword123"
            }
        }


class LoginResponse(BaseModel):
    """Login response with the customer and a bearer token."""
    customer: CustomerResponse
    token: str
    token_type: str = "bearer"
