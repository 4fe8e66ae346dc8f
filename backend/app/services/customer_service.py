from typing import List

from app.core.exceptions import CustomerNotFoundError, EmptyUpdateError
from app.models.customer import Customer
from app.repositories.interfaces import CustomerRepository
from app.utils.helpers import non_empty_fields


class CustomerService:
    """Service for customer operations."""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def get_all(self) -> List[Customer]:
        return await self.customer_repo.get_all()

    async def get_by_id(self, customer_id: str) -> Customer:
        customer = await self.customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    async def create(self, data: dict) -> Customer:
        return await self.customer_repo.create(data)

    async def update(self, customer_id: str, data: dict) -> Customer:
        fields = non_empty_fields(data)
        if not fields:
            raise EmptyUpdateError()
        customer = await self.customer_repo.update(customer_id, fields)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    async def delete(self, customer_id: str) -> Customer:
        customer = await self.customer_repo.delete(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer
