"""
Order service for order CRUD.
"""
from typing import List

from app.core.exceptions import EmptyUpdateError, OrderNotFoundError
from app.models.order import Order
from app.repositories.interfaces import OrderRepository
from app.utils.helpers import non_empty_fields


class OrderService:
    """Service class for order management."""

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    async def get_all(self) -> List[Order]:
        return await self.order_repo.get_all()

    async def get_by_id(self, order_id: str) -> Order:
        order = await self.order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def create(self, data: dict) -> Order:
        """Create an order stamped with the current UTC time."""
        order = Order(**data)
        return await self.order_repo.create(order.model_dump(exclude={"id"}))

    async def update(self, order_id: str, data: dict) -> Order:
        """
        Apply a partial update.

        An empty product list or a zero amount leaves that field unchanged.
        """
        fields = non_empty_fields(data)
        if not fields.get("product_ids"):
            fields.pop("product_ids", None)
        if not fields.get("total_amount"):
            fields.pop("total_amount", None)
        if not fields:
            raise EmptyUpdateError()

        order = await self.order_repo.update(order_id, fields)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def delete(self, order_id: str) -> Order:
        order = await self.order_repo.delete(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order
