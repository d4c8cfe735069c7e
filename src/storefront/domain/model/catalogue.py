"""Catalogue aggregate and the items it offers.

The catalogue is built once from an external item list and never
changes afterwards.  Lookups by name are case-insensitive and always
resolve to the first item with that name in catalogue order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, Sequence

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_ITEM_PRICE = Money(Decimal("0.01"))


def name_key(name: str) -> str:
    """Normalized key used for every case-insensitive name comparison."""
    return name.lower()


@dataclass(frozen=True)
class CatalogueItem:
    """A purchasable product.

    One record type covers both catalogue variants: plain items
    (name and price) and described items.  ``CatalogueItem.create()``
    takes ``require_description`` to choose which rules apply.
    """

    name: str
    price: Money
    description: str | None = None

    @staticmethod
    def create(
        name: str,
        price: Money | str | float | int | Decimal,
        description: str | None = None,
        *,
        require_description: bool = False,
    ) -> CatalogueItem:
        """Create a catalogue item, enforcing all invariants."""
        if not name:
            raise ValidationError("Catalogue items cannot have empty names")

        money = price if isinstance(price, Money) else Money.of(price)
        if money < MIN_ITEM_PRICE:
            raise ValidationError(
                f"Item price must be at least {MIN_ITEM_PRICE}, got {money}"
            )

        if description is None:
            if require_description:
                raise ValidationError(f"Item '{name}' requires a description")
        elif not description:
            raise ValidationError(f"Item '{name}' has an empty description")

        return CatalogueItem(name=name, price=money, description=description)

    @property
    def price_string(self) -> str:
        return str(self.price)

    def __str__(self) -> str:
        if self.description is None:
            return f"{self.name} .......... {self.price_string}"
        return f"{self.name}..... {self.description}.......... {self.price_string}"


@dataclass(frozen=True)
class Catalogue:
    """Aggregate root for the fixed set of items on sale.

    Invariants:
    - at least one item
    - item order is the order the items were supplied in
    """

    items: tuple[CatalogueItem, ...]
    _index: dict[str, CatalogueItem] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        index: dict[str, CatalogueItem] = {}
        for item in self.items:
            # Duplicates keep the earliest entry
            index.setdefault(name_key(item.name), item)
        object.__setattr__(self, "_index", index)

    @staticmethod
    def create(items: Sequence[CatalogueItem]) -> Catalogue:
        """Create a catalogue, enforcing all invariants."""
        if not items:
            raise ValidationError("Catalogue requires at least one item for sale")
        return Catalogue(items=tuple(items))

    def find_item(self, name: str) -> CatalogueItem | None:
        """Return the first item whose name matches, ignoring case."""
        return self._index.get(name_key(name))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CatalogueItem]:
        return iter(self.items)

    def __str__(self) -> str:
        lines = ["MENU"]
        lines.extend(f"{number}. {item}" for number, item in enumerate(self.items, 1))
        return "\n".join(lines) + "\n"
