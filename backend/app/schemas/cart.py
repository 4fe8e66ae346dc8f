from typing import List, Optional
from pydantic import BaseModel, Field

from app.models.cart import Cart


class AddToCartRequest(BaseModel):
    """Schema for adding a product to cart."""
    product_id: str = Field(min_length=1)
    product_name: str = ""
    quantity: int = Field(gt=0)

    class Config:
        json_schema_extra = {
            "example": {
                "product_id": "64f1a2b3c4d5e6f7a8b9c0d2",
                "product_name": "Mechanical Keyboard",
                "quantity": 2
            }
        }


class UpdateCartItemRequest(BaseModel):
    """Schema for setting the quantity of an item already in the cart."""
    product_id: str = Field(min_length=1)
    quantity: int = Field(gt=0)

    class Config:
        json_schema_extra = {
            "example": {
                "product_id": "64f1a2b3c4d5e6f7a8b9c0d2",
                "quantity": 3
            }
        }


class CartItemResponse(BaseModel):
    """Schema for cart item response."""
    product_id: str
    product_name: str
    product_price: float
    quantity: int
    subtotal: float

    class Config:
        from_attributes = True


class CartResponse(BaseModel):
    """Schema for cart response."""
    id: Optional[str] = None
    customer_id: str
    items: List[CartItemResponse]
    total_items: int
    total_price: float

    class Config:
        from_attributes = True

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartResponse":
        return cls.model_validate(cart.model_dump())


class MessageResponse(BaseModel):
    """Schema for plain confirmation messages."""
    message: str
