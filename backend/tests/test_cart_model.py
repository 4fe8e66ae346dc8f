"""
Tests for the cart aggregate and totals recomputation.
"""
import pytest
from pydantic import ValidationError

from app.models.cart import Cart, CartItem, recompute_totals


def make_item(product_id: str, price: float, quantity: int) -> CartItem:
    return CartItem(product_id=product_id, product_name=product_id, product_price=price, quantity=quantity)


class TestRecomputeTotals:
    """Test the pure totals function."""

    def test_empty_items(self):
        """An empty cart has no items and no price."""
        assert recompute_totals([]) == (0, 0.0)

    def test_sums_quantities_and_prices(self):
        """Totals are the sum of quantities and of unit price times quantity."""
        items = [make_item("A", 10.0, 2), make_item("B", 2.5, 4)]
        assert recompute_totals(items) == (6, 30.0)

    def test_applying_twice_gives_same_result(self):
        """The function keeps no state between calls."""
        items = [make_item("A", 19.99, 3), make_item("B", 0.5, 7)]
        first = recompute_totals(items)
        second = recompute_totals(items)
        assert first == second

    def test_ignores_stale_subtotals(self):
        """Totals come from price and quantity, not from a stored subtotal."""
        item = make_item("A", 5.0, 2)
        item.subtotal = 999.0
        assert recompute_totals([item]) == (2, 10.0)


class TestCartRecalculate:
    """Test cart-level recalculation."""

    def test_recalculate_refreshes_subtotals_and_totals(self):
        """Every item subtotal and both cart totals are rebuilt."""
        cart = Cart(customer_id="c1", items=[make_item("A", 3.0, 2), make_item("B", 1.5, 2)])
        cart.items[0].quantity = 5

        cart.recalculate()

        assert cart.items[0].subtotal == 15.0
        assert cart.items[1].subtotal == 3.0
        assert cart.total_items == 7
        assert cart.total_price == 18.0

    def test_find_item(self):
        """Items are looked up by product id."""
        cart = Cart(customer_id="c1", items=[make_item("A", 3.0, 1)])
        assert cart.find_item("A").product_id == "A"
        assert cart.find_item("missing") is None

    def test_to_document_excludes_id(self):
        """Stored documents never carry the id field; MongoDB owns `_id`."""
        cart = Cart(_id="64f1a2b3c4d5e6f7a8b9c0d1", customer_id="c1")
        document = cart.to_document()
        assert "id" not in document
        assert "_id" not in document
        assert document["customer_id"] == "c1"

    def test_quantity_must_be_positive(self):
        """Zero quantities are rejected by the model."""
        with pytest.raises(ValidationError):
            make_item("A", 1.0, 0)
