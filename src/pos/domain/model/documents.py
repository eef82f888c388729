"""Printable documents produced by a successful checkout.

Both documents keep their numbers as Decimals / Money so callers can
compare them numerically; ``render()`` turns them into the output lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from pos.domain.model.value_objects import Money

SHIPMENT_HEADER = "** Shipment notice **"
RECEIPT_HEADER = "** Checkout receipt **"
RECEIPT_RULE = "-" * 22


@dataclass(frozen=True)
class ShipmentLine:
    quantity: int
    name: str
    weight_kg: Decimal

    @property
    def grams(self) -> int:
        return int((self.weight_kg * 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class ShipmentNotice:
    lines: tuple[ShipmentLine, ...]

    @property
    def total_weight_kg(self) -> Decimal:
        return sum((line.weight_kg for line in self.lines), Decimal("0"))

    def render(self) -> list[str]:
        total = self.total_weight_kg.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return [
            "",
            SHIPMENT_HEADER,
            *(f"{line.quantity}x {line.name}\t{line.grams}g" for line in self.lines),
            f"Total package weight {total}kg",
        ]


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    name: str
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping: Money

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping

    def render(self) -> list[str]:
        return [
            "",
            RECEIPT_HEADER,
            *(f"{line.quantity}x {line.name}\t{line.line_total}" for line in self.lines),
            RECEIPT_RULE,
            f"Subtotal\t{self.subtotal}",
            f"Shipping\t{self.shipping}",
            f"Amount\t{self.total}",
        ]
