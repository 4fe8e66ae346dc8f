"""
Tests for the customer, product and order services.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.exceptions import (
    CustomerNotFoundError,
    EmptyUpdateError,
    OrderNotFoundError,
    ProductNotFoundError
)
from app.models.order import Order
from app.services.customer_service import CustomerService
from app.services.order_service import OrderService
from app.services.product_service import ProductService
from fakes import KEYBOARD_ID


class TestProductService:
    """Test product catalog operations."""

    @pytest.mark.asyncio
    async def test_get_missing_product(self, product_repo):
        service = ProductService(product_repo)
        with pytest.raises(ProductNotFoundError):
            await service.get_by_id("64f1a2b3c4d5e6f7a8b9ffff")

    @pytest.mark.asyncio
    async def test_update_ignores_empty_fields(self, product_repo):
        """Only fields with a value are written."""
        service = ProductService(product_repo)

        product = await service.update(KEYBOARD_ID, {"name": "", "price": 95.0, "stock": None})

        assert product.name == "Mechanical Keyboard"
        assert product.price == 95.0

    @pytest.mark.asyncio
    async def test_update_with_nothing_to_change(self, product_repo):
        service = ProductService(product_repo)
        with pytest.raises(EmptyUpdateError):
            await service.update(KEYBOARD_ID, {"name": None, "price": None, "stock": None})

    @pytest.mark.asyncio
    async def test_delete_returns_removed_product(self, product_repo):
        service = ProductService(product_repo)

        removed = await service.delete(KEYBOARD_ID)

        assert removed.id == KEYBOARD_ID
        with pytest.raises(ProductNotFoundError):
            await service.delete(KEYBOARD_ID)


class TestCustomerService:
    """Test customer operations."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, customer_repo):
        service = CustomerService(customer_repo)

        created = await service.create({"name": "Ada", "email": "ada@example.com", "phone": ""})
        fetched = await service.get_by_id(created.id)

        assert fetched.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_update_missing_customer(self, customer_repo):
        service = CustomerService(customer_repo)
        with pytest.raises(CustomerNotFoundError):
            await service.update("64f1a2b3c4d5e6f7a8b9ffff", {"name": "Grace"})


class TestOrderService:
    """Test order operations against a mocked repository."""

    @pytest.mark.asyncio
    async def test_create_stamps_creation_time(self):
        repo = MagicMock()
        repo.create = AsyncMock(side_effect=lambda data: Order(_id="o1", **data))
        service = OrderService(repo)

        order = await service.create({"customer_id": "c1", "product_ids": ["p1"], "total_amount": 10.0})

        document = repo.create.await_args.args[0]
        assert "id" not in document
        assert document["created_at"].tzinfo is not None
        assert order.id == "o1"

    @pytest.mark.asyncio
    async def test_update_drops_empty_products_and_zero_amount(self):
        """An empty product list or a zero amount means "leave unchanged"."""
        repo = MagicMock()
        repo.update = AsyncMock(return_value=Order(_id="o1", customer_id="c2"))
        service = OrderService(repo)

        await service.update("o1", {"customer_id": "c2", "product_ids": [], "total_amount": 0})

        repo.update.assert_awaited_once_with("o1", {"customer_id": "c2"})

    @pytest.mark.asyncio
    async def test_update_with_only_empty_values(self):
        repo = MagicMock()
        repo.update = AsyncMock()
        service = OrderService(repo)

        with pytest.raises(EmptyUpdateError):
            await service.update("o1", {"customer_id": None, "product_ids": [], "total_amount": 0})
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_missing_order(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(OrderNotFoundError):
            await OrderService(repo).get_by_id("o1")
