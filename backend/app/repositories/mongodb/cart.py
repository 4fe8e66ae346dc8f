import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from pydantic import ValidationError

from app.core.exceptions import StoreError
from app.models.cart import Cart
from app.repositories.interfaces import CartRepository
from app.utils.helpers import format_document, parse_object_id

logger = logging.getLogger(__name__)


class MongoCartRepository(CartRepository):
    """Carts stored one document per customer in the `carts` collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db.carts

    async def find_by_customer_id(self, customer_id: str) -> Optional[Cart]:
        try:
            document = await self.collection.find_one({"customer_id": customer_id})
        except PyMongoError as e:
            logger.error(f"Failed to find cart for customer {customer_id}: {e}")
            raise StoreError(f"find cart for customer {customer_id}", e) from e

        if document is None:
            return None

        try:
            return Cart.model_validate(format_document(document))
        except ValidationError as e:
            logger.error(f"Failed to decode cart for customer {customer_id}: {e}")
            raise StoreError(f"decode cart for customer {customer_id}", e) from e

    async def insert(self, cart: Cart) -> str:
        try:
            result = await self.collection.insert_one(cart.to_document())
        except PyMongoError as e:
            logger.error(f"Failed to create cart for customer {cart.customer_id}: {e}")
            raise StoreError("create new cart", e) from e
        return str(result.inserted_id)

    async def replace_by_id(self, cart_id: str, cart: Cart) -> None:
        object_id = parse_object_id(cart_id)
        if object_id is None:
            raise StoreError(f"update cart with invalid id {cart_id}")

        try:
            result = await self.collection.replace_one({"_id": object_id}, cart.to_document())
        except PyMongoError as e:
            logger.error(f"Failed to update cart {cart_id}: {e}")
            raise StoreError("update cart", e) from e

        if result.matched_count == 0:
            # Deleted by a concurrent clear between our read and write
            logger.warning(f"Cart {cart_id} disappeared before it could be updated")
            raise StoreError(f"update cart {cart_id}: document no longer exists")

    async def delete_by_customer_id(self, customer_id: str) -> int:
        try:
            result = await self.collection.delete_one({"customer_id": customer_id})
        except PyMongoError as e:
            logger.error(f"Failed to clear cart for customer {customer_id}: {e}")
            raise StoreError(f"clear cart for customer {customer_id}", e) from e
        return result.deleted_count
