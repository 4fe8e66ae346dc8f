"""
Shared test setup: required settings and repository fixtures.
"""
import os

# Must be set before app.core.config is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "1000")

import pytest

from app.models.product import Product
from fakes import (
    KEYBOARD_ID,
    MOUSE_ID,
    InMemoryCartRepository,
    InMemoryCustomerRepository,
    InMemoryProductRepository
)


@pytest.fixture
def products():
    return [
        Product(_id=KEYBOARD_ID, name="Mechanical Keyboard", price=89.5, stock=40),
        Product(_id=MOUSE_ID, name="Wireless Mouse", price=25.0, stock=100),
    ]


@pytest.fixture
def cart_repo():
    return InMemoryCartRepository()


@pytest.fixture
def product_repo(products):
    return InMemoryProductRepository(products)


@pytest.fixture
def customer_repo():
    return InMemoryCustomerRepository()
