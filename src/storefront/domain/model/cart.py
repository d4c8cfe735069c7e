"""Cart aggregate: the items a shopper intends to buy.

A cart belongs to exactly one shopping session and is mutated in place
by it.  Once an order has been placed from a cart, the session throws
the cart away and starts a new empty one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from storefront.domain.exceptions import CartFullError, ItemNotFoundError
from storefront.domain.model.catalogue import Catalogue, CatalogueItem, name_key
from storefront.domain.model.value_objects import Money

MAX_CART_ITEMS = 5


@dataclass
class Cart:
    """Aggregate root for a shopper's pending items.

    Invariants:
    - never holds more than ``MAX_CART_ITEMS`` items
    - items keep the order they were added in
    """

    items: list[CatalogueItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, name: str, catalogue: Catalogue) -> CatalogueItem:
        """Look *name* up in *catalogue* and append it to the cart.

        Capacity is checked before the lookup, so a full cart reports
        CartFullError even for names the catalogue does not carry.
        """
        if self.is_full:
            raise CartFullError(
                f"Cart is full (maximum {MAX_CART_ITEMS} items)"
            )

        item = catalogue.find_item(name)
        if item is None:
            raise ItemNotFoundError(f"No such item '{name}' found in catalogue")

        self.items.append(item)
        return item

    def remove_item(self, name: str) -> CatalogueItem:
        """Remove the first item whose name matches, ignoring case."""
        key = name_key(name)
        for position, item in enumerate(self.items):
            if name_key(item.name) == key:
                return self.items.pop(position)
        raise ItemNotFoundError(f"No such item '{name}' found in cart")

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.price
        return result

    def total_price(self) -> str:
        return str(self.total)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def is_full(self) -> bool:
        return len(self.items) >= MAX_CART_ITEMS

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CatalogueItem]:
        return iter(self.items)

    def __str__(self) -> str:
        lines = ["CART"]
        lines.extend(f"{number}. {item}" for number, item in enumerate(self.items, 1))
        lines.append(f"TOTAL: {self.total_price()}")
        return "\n".join(lines) + "\n"
