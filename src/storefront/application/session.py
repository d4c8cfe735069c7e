"""Application service: the shopping session.

A session owns one catalogue, the shopper's current cart and the
history of orders placed so far.  Every front end action (add, remove,
place order) goes through here so the Cart -> Order transition is
handled in one place:

  1. build the Order from the cart (rejects an empty cart)
  2. persist customer details, when given
  3. append the order to the history
  4. start a fresh, empty cart

If step 1 or 2 fails, neither the cart nor the history has changed.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, CartLineDTO, OrderDTO
from storefront.domain.exceptions import ItemNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalogue import Catalogue, CatalogueItem
from storefront.domain.model.customer import CustomerInfo
from storefront.domain.model.order import Order, OrderHistory
from storefront.domain.repository.customer_repository import CustomerRepository

logger = structlog.get_logger(__name__)


class ShoppingSession:

    def __init__(
        self,
        catalogue: Catalogue,
        customer_repo: CustomerRepository | None = None,
    ) -> None:
        self._catalogue = catalogue
        self._customer_repo = customer_repo
        self._cart = Cart()
        self._history = OrderHistory()

    @property
    def catalogue(self) -> Catalogue:
        return self._catalogue

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def history(self) -> OrderHistory:
        return self._history

    # --- Catalogue ------------------------------------------------------------

    def select_item(self, name: str) -> CatalogueItem:
        """Return the catalogue item shown when the shopper picks *name*."""
        item = self._catalogue.find_item(name)
        if item is None:
            raise ItemNotFoundError(f"No such item '{name}' found in catalogue")
        return item

    # --- Cart -----------------------------------------------------------------

    def add_to_cart(self, name: str) -> CartDTO:
        item = self._cart.add_item(name, self._catalogue)
        logger.info("cart.item_added", item=item.name, cart_size=len(self._cart))
        return self.view_cart()

    def remove_from_cart(self, name: str) -> CartDTO:
        item = self._cart.remove_item(name)
        logger.info("cart.item_removed", item=item.name, cart_size=len(self._cart))
        return self.view_cart()

    def view_cart(self) -> CartDTO:
        return CartDTO(
            lines=_lines(self._cart.items),
            total=self._cart.total_price(),
            is_full=self._cart.is_full,
            text=str(self._cart),
        )

    # --- Orders ---------------------------------------------------------------

    def place_order(self, customer: CustomerInfo | None = None) -> OrderDTO:
        """Turn the current cart into an order and start a new cart."""
        order = Order.create(self._cart)

        if customer is not None:
            if self._customer_repo is not None:
                self._customer_repo.persist(customer)
            else:
                logger.warning("order.customer_not_recorded", customer=customer.name)

        self._history.add_order(order)
        self._cart = Cart()

        number = len(self._history)
        logger.info(
            "order.placed",
            order_number=number,
            item_count=len(order),
            total=str(order.total),
            customer_recorded=customer is not None and self._customer_repo is not None,
        )
        return self._to_dto(number, order)

    def order_history(self) -> list[OrderDTO]:
        return [
            self._to_dto(number, order)
            for number, order in enumerate(self._history, 1)
        ]

    def history_text(self) -> str:
        return str(self._history)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(number: int, order: Order) -> OrderDTO:
        return OrderDTO(
            number=number,
            lines=_lines(order.items),
            total=str(order.total),
            placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
            text=str(order),
        )


def _lines(items) -> list[CartLineDTO]:
    return [
        CartLineDTO(position=position, name=item.name, price=item.price_string)
        for position, item in enumerate(items, 1)
    ]
