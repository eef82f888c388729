"""The walkthrough catalog used by ``pos demo`` and when no file is given."""

from __future__ import annotations

from datetime import datetime, timedelta

from pos.domain.model.clock import Clock, system_clock
from pos.domain.model.product import (
    DigitalProduct,
    PerishableProduct,
    Product,
    ShippableProduct,
)
from pos.domain.model.value_objects import Money, Weight


def demo_products(clock: Clock = system_clock) -> list[Product]:
    """Fresh product objects, so every run starts from full stock."""
    return [
        ShippableProduct("Cheese", Money.of("100"), 10, Weight.of("0.2")),
        ShippableProduct("Biscuits", Money.of("150"), 5, Weight.of("0.7")),
        ShippableProduct("TV", Money.of("1000"), 3, Weight.of("10")),
        DigitalProduct("Scratch Card", Money.of("50"), 100),
        PerishableProduct(
            "Yogurt", Money.of("20"), 12, clock() + timedelta(days=1), Weight.of("0.15")
        ),
    ]


def expired_cheese(now: datetime) -> PerishableProduct:
    return PerishableProduct(
        "Cheese", Money.of("100"), 10, now - timedelta(days=1), Weight.of("0.2")
    )
