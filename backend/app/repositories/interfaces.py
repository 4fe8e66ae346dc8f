"""
Repository interfaces.

Services depend on these abstract classes only; the MongoDB adapters live in
`app.repositories.mongodb` and tests substitute in-memory fakes.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.cart import Cart
from app.models.customer import Customer
from app.models.order import Order
from app.models.product import Product


class CartRepository(ABC):
    """Persistence for carts, keyed by customer id."""

    @abstractmethod
    async def find_by_customer_id(self, customer_id: str) -> Optional[Cart]:
        """Return the customer's cart, or None if it has none."""
        raise NotImplementedError

    @abstractmethod
    async def insert(self, cart: Cart) -> str:
        """Store a new cart and return its assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def replace_by_id(self, cart_id: str, cart: Cart) -> None:
        """Replace the whole cart document."""
        raise NotImplementedError

    @abstractmethod
    async def delete_by_customer_id(self, customer_id: str) -> int:
        """Delete the customer's cart and return the number of documents removed."""
        raise NotImplementedError


class ProductRepository(ABC):

    @abstractmethod
    async def get_all(self) -> List[Product]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Return the product, or None when absent or the id is malformed."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, data: dict) -> Product:
        raise NotImplementedError

    @abstractmethod
    async def update(self, product_id: str, fields: dict) -> Optional[Product]:
        """Apply `fields` and return the updated product, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, product_id: str) -> Optional[Product]:
        """Delete and return the removed product, or None if absent."""
        raise NotImplementedError


class CustomerRepository(ABC):

    @abstractmethod
    async def get_all(self) -> List[Customer]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Customer]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, data: dict) -> Customer:
        """Insert a customer; raises EmailAlreadyRegisteredError if the email is taken."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, customer_id: str, fields: dict) -> Optional[Customer]:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, customer_id: str) -> Optional[Customer]:
        raise NotImplementedError


class OrderRepository(ABC):

    @abstractmethod
    async def get_all(self) -> List[Order]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Optional[Order]:
        raise NotImplementedError

    @abstractmethod
    async def create(self, data: dict) -> Order:
        raise NotImplementedError

    @abstractmethod
    async def update(self, order_id: str, fields: dict) -> Optional[Order]:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, order_id: str) -> Optional[Order]:
        raise NotImplementedError
