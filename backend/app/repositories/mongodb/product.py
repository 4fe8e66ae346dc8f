from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.product import Product
from app.repositories.interfaces import ProductRepository
from app.repositories.mongodb.base import MongoCrudRepository


class MongoProductRepository(MongoCrudRepository[Product], ProductRepository):
    model = Product
    entity = "product"

    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db.products)
