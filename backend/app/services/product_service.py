from typing import List

from app.core.exceptions import EmptyUpdateError, ProductNotFoundError
from app.models.product import Product
from app.repositories.interfaces import ProductRepository
from app.utils.helpers import non_empty_fields


class ProductService:
    """Service for product catalog operations."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def get_all(self) -> List[Product]:
        return await self.product_repo.get_all()

    async def get_by_id(self, product_id: str) -> Product:
        product = await self.product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create(self, data: dict) -> Product:
        return await self.product_repo.create(data)

    async def update(self, product_id: str, data: dict) -> Product:
        """Apply the non-empty fields of `data` to the product."""
        fields = non_empty_fields(data)
        if not fields:
            raise EmptyUpdateError()
        product = await self.product_repo.update(product_id, fields)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def delete(self, product_id: str) -> Product:
        product = await self.product_repo.delete(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
