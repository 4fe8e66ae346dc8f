from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.order import Order
from app.repositories.interfaces import OrderRepository
from app.repositories.mongodb.base import MongoCrudRepository


class MongoOrderRepository(MongoCrudRepository[Order], OrderRepository):
    model = Order
    entity = "order"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db.orders)
