"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class CheckoutDTO:
    """Output: the outcome of a successful checkout."""

    customer_name: str
    subtotal: str
    shipping: str
    total: str
    remaining_balance: str
    shipped: bool


@dataclass(frozen=True)
class CatalogLineDTO:
    """Output: a single catalog entry as displayed to the user."""

    name: str
    kind: str
    price: str
    stock: int
    weight: str  # e.g. "0.2kg", empty for digital goods
    expires_at: str  # empty unless perishable
