"""Order and OrderHistory.

An Order is a frozen snapshot of a cart taken at the moment the shopper
confirms it.  Changing or discarding the cart afterwards never changes
the order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator

from storefront.domain.exceptions import EmptyOrderError
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalogue import CatalogueItem
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """A placed order.

    Use ``Order.create()`` to build one from a cart; it rejects empty
    carts.
    """

    items: tuple[CatalogueItem, ...]
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(cart: Cart) -> Order:
        if cart.is_empty:
            raise EmptyOrderError("Orders cannot be empty")
        return Order(items=tuple(cart.items))

    @property
    def total(self) -> Money:
        return self._as_cart().total

    def _as_cart(self) -> Cart:
        return Cart(items=list(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        # Same layout as the cart, minus its "CART" header line
        lines = str(self._as_cart()).split("\n")
        return "\n".join(lines[1:])


@dataclass
class OrderHistory:
    """Append-only record of the orders placed during a session."""

    orders: list[Order] = field(default_factory=list)

    def add_order(self, order: Order) -> None:
        self.orders.append(order)

    def __len__(self) -> int:
        return len(self.orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __str__(self) -> str:
        blocks = "".join(f"{order}\n" for order in self.orders)
        return f"ORDERS\n{blocks}"
