from typing import Iterable, List, Optional, Tuple
from pydantic import BaseModel, Field


class CartItem(BaseModel):
    """Line item in a shopping cart.

    `product_price` is the unit price copied from the product when the item
    was last added or updated; it does not follow later price changes.
    """
    product_id: str
    product_name: str = ""
    product_price: float = Field(ge=0)
    quantity: int = Field(gt=0)
    subtotal: float = 0.0

    def refresh_subtotal(self) -> None:
        self.subtotal = self.product_price * self.quantity


def recompute_totals(items: Iterable[CartItem]) -> Tuple[int, float]:
    """Return (total_items, total_price) for a sequence of cart items."""
    total_items = 0
    total_price = 0.0
    for item in items:
        total_items += item.quantity
        total_price += item.product_price * item.quantity
    return total_items, total_price


class Cart(BaseModel):
    """Shopping cart model for MongoDB. One document per customer."""
    id: Optional[str] = Field(None, alias="_id")
    customer_id: str
    items: List[CartItem] = Field(default_factory=list)
    total_items: int = 0
    total_price: float = 0.0

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "customer_id": "64f1a2b3c4d5e6f7a8b9c0d1",
                "items": [
                    {
                        "product_id": "64f1a2b3c4d5e6f7a8b9c0d2",
                        "product_name": "Mechanical Keyboard",
                        "product_price": 89.5,
                        "quantity": 2,
                        "subtotal": 179.0
                    }
                ],
                "total_items": 2,
                "total_price": 179.0
            }
        }

    def find_item(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def recalculate(self) -> None:
        """Refresh every item subtotal and the cart totals from `items`."""
        for item in self.items:
            item.refresh_subtotal()
        self.total_items, self.total_price = recompute_totals(self.items)

    def to_document(self) -> dict:
        """Mongo document without the `_id` key."""
        return self.model_dump(exclude={"id"})
