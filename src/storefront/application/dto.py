"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart entry as displayed to the user."""

    position: int
    name: str
    price: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str
    is_full: bool
    text: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    number: int
    lines: list[CartLineDTO]
    total: str
    placed_at: str
    text: str


@dataclass(frozen=True)
class CustomerDTO:
    name: str
    shipping_address: str
    email_address: str
    payment_details: str
