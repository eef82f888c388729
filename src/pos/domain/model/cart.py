"""Cart aggregate: an ordered list of line items awaiting checkout.

The cart holds shared references to catalog products; it never owns them
and never reserves stock. Adding the same product twice produces two
separate lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pos.domain.exceptions import InsufficientStockError
from pos.domain.model.product import Product, Shippable
from pos.domain.model.value_objects import Money, Quantity

# Currency units charged per kilogram shipped.
SHIPPING_RATE_PER_KG = Decimal("10.0")


@dataclass(frozen=True)
class CartItem:
    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.unit_price * self.quantity.value


@dataclass(frozen=True)
class ManifestLine:
    """One shippable cart line as seen by the shipping service."""

    item: Shippable
    quantity: int

    @property
    def weight_kg(self) -> Decimal:
        return self.item.unit_weight_kg.kg * self.quantity


@dataclass
class Cart:
    _items: list[CartItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int) -> CartItem:
        """Append a line for *quantity* units of *product*.

        Stock is only checked here, not reserved; checkout checks again.
        """
        qty = Quantity(quantity)
        if qty.value > product.stock:
            raise InsufficientStockError()
        item = CartItem(product=product, quantity=qty)
        self._items.append(item)
        return item

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    # --- Pricing --------------------------------------------------------------

    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    def shipping_fee(self) -> Money:
        fee = Decimal("0")
        for line in self.shippable_manifest():
            fee += line.weight_kg * SHIPPING_RATE_PER_KG
        return Money(fee)

    def shippable_manifest(self) -> list[ManifestLine]:
        manifest: list[ManifestLine] = []
        for item in self._items:
            view = item.product.shipping_view()
            if view is not None:
                manifest.append(ManifestLine(item=view, quantity=item.quantity.value))
        return manifest
