"""Product aggregate and its variants.

Products live independently of carts. A product may be referenced by any
number of cart lines at once; the only state it ever changes is its stock
level, and only through ``reduce_stock()``.

The variants form a closed family tagged by ``ProductKind``. Code that
needs the shipping side of a product asks ``shipping_view()`` instead of
checking concrete classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol

from pos.domain.exceptions import InsufficientStockError, ValidationError
from pos.domain.model.clock import system_clock
from pos.domain.model.value_objects import Money, Weight


class ProductKind(Enum):
    PERISHABLE = "perishable"
    SHIPPABLE = "shippable"
    DIGITAL = "digital"


class Shippable(Protocol):
    """What the shipping side needs to know about a physical item."""

    name: str
    unit_weight_kg: Weight


@dataclass(eq=False)
class Product(ABC):
    """A product in the catalog.

    Compared by identity: two lines holding the same product object refer
    to the same stock.
    """

    name: str
    unit_price: Money
    stock: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")

    @property
    @abstractmethod
    def kind(self) -> ProductKind:
        """Variant tag."""

    @abstractmethod
    def is_expired(self, now: datetime | None = None) -> bool:
        """True if the product can no longer be sold at *now*."""

    @abstractmethod
    def is_shippable(self) -> bool:
        """True if the product physically ships and therefore has a weight."""

    def shipping_view(self) -> Shippable | None:
        return self if self.is_shippable() else None  # type: ignore[return-value]

    def reduce_stock(self, quantity: int) -> None:
        """Permanently deduct sold units.

        Raises InsufficientStockError if more units are requested than
        are in stock.
        """
        if quantity <= 0:
            raise ValidationError("Stock reduction must be positive")
        if quantity > self.stock:
            raise InsufficientStockError()
        self.stock -= quantity


@dataclass(eq=False)
class PerishableProduct(Product):
    """Food and other goods with a sell-by instant. All perishables ship."""

    expires_at: datetime
    unit_weight_kg: Weight

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.expires_at.tzinfo is None:
            raise ValidationError("Expiry instant must be timezone-aware")

    @property
    def kind(self) -> ProductKind:
        return ProductKind.PERISHABLE

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now if now is not None else system_clock()
        return now > self.expires_at

    def is_shippable(self) -> bool:
        return True


@dataclass(eq=False)
class ShippableProduct(Product):
    """Non-perishable physical goods."""

    unit_weight_kg: Weight

    @property
    def kind(self) -> ProductKind:
        return ProductKind.SHIPPABLE

    def is_expired(self, now: datetime | None = None) -> bool:
        return False

    def is_shippable(self) -> bool:
        return True


@dataclass(eq=False)
class DigitalProduct(Product):
    """Delivered electronically; never expires and never ships."""

    @property
    def kind(self) -> ProductKind:
        return ProductKind.DIGITAL

    def is_expired(self, now: datetime | None = None) -> bool:
        return False

    def is_shippable(self) -> bool:
        return False
