"""
Cart service - read-modify-write operations on a customer's cart.

Every operation re-reads the cart from the repository; nothing is cached
between calls. Mutations for the same customer are serialised by an
in-process asyncio lock so two concurrent adds cannot overwrite each other
within one server process.
"""
import asyncio
import logging
import weakref

from app.core.exceptions import (
    CartNotFoundError,
    InvalidQuantityError,
    ItemNotFoundError,
    ProductNotFoundError
)
from app.models.cart import Cart, CartItem
from app.repositories.interfaces import CartRepository, ProductRepository

logger = logging.getLogger(__name__)


class CartService:
    """Service for cart operations."""

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

    def _customer_lock(self, customer_id: str) -> asyncio.Lock:
        lock = self._locks.get(customer_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[customer_id] = lock
        return lock

    @staticmethod
    def _validate_quantity(quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

    async def _get_product(self, product_id: str):
        product = await self.product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def _get_existing_cart(self, customer_id: str) -> Cart:
        cart = await self.cart_repo.find_by_customer_id(customer_id)
        if cart is None:
            raise CartNotFoundError(customer_id)
        return cart

    async def add_to_cart(
        self,
        customer_id: str,
        product_id: str,
        product_name: str,
        quantity: int
    ) -> Cart:
        """
        Add a product to the customer's cart.

        Creates the cart on first use. If the product is already in the cart
        its quantity is increased by `quantity` and its unit price is
        re-snapshotted from the catalog.
        """
        self._validate_quantity(quantity)
        product = await self._get_product(product_id)
        name = product_name or product.name

        async with self._customer_lock(customer_id):
            cart = await self.cart_repo.find_by_customer_id(customer_id)

            if cart is None:
                cart = Cart(
                    customer_id=customer_id,
                    items=[CartItem(
                        product_id=product_id,
                        product_name=name,
                        product_price=product.price,
                        quantity=quantity
                    )]
                )
                cart.recalculate()
                cart.id = await self.cart_repo.insert(cart)
                logger.info(f"Created cart {cart.id} for customer {customer_id}")
                return cart

            item = cart.find_item(product_id)
            if item is not None:
                item.quantity += quantity
                item.product_price = product.price
            else:
                cart.items.append(CartItem(
                    product_id=product_id,
                    product_name=name,
                    product_price=product.price,
                    quantity=quantity
                ))

            cart.recalculate()
            await self.cart_repo.replace_by_id(cart.id, cart)
            return cart

    async def get_cart_by_customer_id(self, customer_id: str) -> Cart:
        """Return the customer's cart; raises CartNotFoundError if there is none."""
        return await self._get_existing_cart(customer_id)

    async def update_cart_item(self, customer_id: str, product_id: str, quantity: int) -> Cart:
        """
        Set the quantity of an item already in the cart.

        Never inserts: a product id that is not in the cart raises
        ItemNotFoundError and nothing is written.
        """
        self._validate_quantity(quantity)

        async with self._customer_lock(customer_id):
            cart = await self._get_existing_cart(customer_id)

            item = cart.find_item(product_id)
            if item is None:
                raise ItemNotFoundError(product_id)

            product = await self._get_product(product_id)
            item.quantity = quantity
            item.product_price = product.price

            cart.recalculate()
            await self.cart_repo.replace_by_id(cart.id, cart)
            return cart

    async def remove_cart_item(self, customer_id: str, product_id: str) -> Cart:
        """Remove a product from the cart."""
        async with self._customer_lock(customer_id):
            cart = await self._get_existing_cart(customer_id)

            original_length = len(cart.items)
            cart.items = [item for item in cart.items if item.product_id != product_id]

            if len(cart.items) == original_length:
                raise ItemNotFoundError(product_id)

            cart.recalculate()
            await self.cart_repo.replace_by_id(cart.id, cart)
            return cart

    async def clear_cart(self, customer_id: str) -> int:
        """
        Delete the customer's cart document.

        Clearing a customer without a cart is a no-op, not an error.
        Returns the number of deleted documents (0 or 1).
        """
        async with self._customer_lock(customer_id):
            deleted = await self.cart_repo.delete_by_customer_id(customer_id)

        if deleted == 0:
            logger.info(f"Cart for customer {customer_id} was already empty")
        else:
            logger.info(f"Cleared cart for customer {customer_id}")
        return deleted
