import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.exceptions import EmailAlreadyRegisteredError, StoreError
from app.models.customer import Customer
from app.repositories.interfaces import CustomerRepository
from app.repositories.mongodb.base import MongoCrudRepository

logger = logging.getLogger(__name__)


class MongoCustomerRepository(MongoCrudRepository[Customer], CustomerRepository):
    model = Customer
    entity = "customer"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db.customers)

    def _duplicate_error(self, data: dict, error: DuplicateKeyError) -> EmailAlreadyRegisteredError:
        # customers.email is the only unique index besides _id
        return EmailAlreadyRegisteredError(data.get("email", ""))

    async def get_by_email(self, email: str) -> Optional[Customer]:
        try:
            document = await self.collection.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"Failed to find customer by email: {e}")
            raise StoreError("find customer by email", e) from e

        if document is None:
            return None
        return self._to_model(document)
