"""Unit tests for Order and OrderHistory."""

import pytest

from storefront.domain.exceptions import EmptyOrderError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalogue import Catalogue, CatalogueItem
from storefront.domain.model.order import Order, OrderHistory
from storefront.domain.model.value_objects import Money


def _catalogue() -> Catalogue:
    return Catalogue.create([
        CatalogueItem.create("Tea", 3.00),
        CatalogueItem.create("Cake", 5.50),
    ])


def _cart(*names: str) -> Cart:
    catalogue = _catalogue()
    cart = Cart()
    for name in names:
        cart.add_item(name, catalogue)
    return cart


class TestOrderCreation:

    def test_empty_cart_rejected(self):
        with pytest.raises(EmptyOrderError, match="cannot be empty"):
            Order.create(Cart())

    def test_empty_order_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Order.create(Cart())

    def test_snapshot_of_cart_items(self):
        order = Order.create(_cart("Tea", "Cake"))
        assert [i.name for i in order.items] == ["Tea", "Cake"]
        assert order.total == Money.of("8.50")
        assert len(order) == 2

    def test_later_cart_changes_do_not_affect_order(self):
        cart = _cart("Tea", "Cake")
        order = Order.create(cart)
        cart.remove_item("Tea")
        cart.add_item("Cake", _catalogue())
        assert [i.name for i in order.items] == ["Tea", "Cake"]

    def test_placed_at_is_timezone_aware(self):
        assert Order.create(_cart("Tea")).placed_at.tzinfo is not None


class TestOrderDisplay:

    def test_display_is_cart_without_header(self):
        order = Order.create(_cart("Tea", "Cake"))
        assert str(order) == (
            "1. Tea .......... $3.00\n"
            "2. Cake .......... $5.50\n"
            "TOTAL: $8.50\n"
        )

    def test_display_does_not_start_with_cart(self):
        assert not str(Order.create(_cart("Tea"))).startswith("CART")


class TestOrderHistory:

    def test_starts_empty(self):
        history = OrderHistory()
        assert len(history) == 0
        assert str(history) == "ORDERS\n"

    def test_keeps_orders_in_call_order(self):
        history = OrderHistory()
        orders = [Order.create(_cart("Tea")), Order.create(_cart("Cake")), Order.create(_cart("Tea", "Tea"))]
        for order in orders:
            history.add_order(order)
        assert len(history) == 3
        assert list(history) == orders

    def test_display_separates_orders_with_blank_lines(self):
        history = OrderHistory()
        history.add_order(Order.create(_cart("Tea")))
        history.add_order(Order.create(_cart("Cake")))
        assert str(history) == (
            "ORDERS\n"
            "1. Tea .......... $3.00\n"
            "TOTAL: $3.00\n"
            "\n"
            "1. Cake .......... $5.50\n"
            "TOTAL: $5.50\n"
            "\n"
        )
