"""Unit tests for the product variants."""

from datetime import datetime, timedelta

import pytest

from pos.domain.exceptions import InsufficientStockError, ValidationError
from pos.domain.model.product import (
    DigitalProduct,
    PerishableProduct,
    ProductKind,
    ShippableProduct,
)
from pos.domain.model.value_objects import Money, Weight
from tests.fakes import NOW, biscuits, perishable_cheese, scratch_card


class TestCapabilities:

    def test_shippable_product(self):
        p = biscuits()
        assert p.kind == ProductKind.SHIPPABLE
        assert p.is_shippable()
        assert not p.is_expired(NOW)
        assert p.shipping_view() is p

    def test_digital_product(self):
        p = scratch_card()
        assert p.kind == ProductKind.DIGITAL
        assert not p.is_shippable()
        assert not p.is_expired(NOW)
        assert p.shipping_view() is None

    def test_perishable_product_ships_with_weight(self):
        p = perishable_cheese(timedelta(days=1))
        assert p.kind == ProductKind.PERISHABLE
        assert p.is_shippable()
        assert p.shipping_view().unit_weight_kg == Weight.of("0.2")


class TestExpiry:

    def test_not_expired_before_instant(self):
        p = perishable_cheese(timedelta(seconds=1))
        assert not p.is_expired(NOW)

    def test_not_expired_exactly_at_instant(self):
        p = perishable_cheese(timedelta(0))
        assert not p.is_expired(NOW)

    def test_expired_after_instant(self):
        p = perishable_cheese(timedelta(seconds=-1))
        assert p.is_expired(NOW)

    def test_defaults_to_system_clock(self):
        assert perishable_cheese(timedelta(days=-365 * 50)).is_expired()

    def test_naive_expiry_rejected(self):
        with pytest.raises(ValidationError, match="timezone-aware"):
            PerishableProduct(
                "Milk", Money.of("3"), 1, datetime(2030, 1, 1), Weight.of("1")
            )


class TestReduceStock:

    def test_reduces_stock(self):
        p = biscuits(stock=5)
        p.reduce_stock(3)
        assert p.stock == 2

    def test_reduce_to_zero(self):
        p = biscuits(stock=5)
        p.reduce_stock(5)
        assert p.stock == 0

    def test_more_than_stock_rejected(self):
        p = biscuits(stock=5)
        with pytest.raises(InsufficientStockError, match="Insufficient stock."):
            p.reduce_stock(6)
        assert p.stock == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            biscuits().reduce_stock(0)


class TestConstruction:

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            DigitalProduct("  ", Money.of("1"), 1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            ShippableProduct("Box", Money.of("1"), -1, Weight.of("1"))

    def test_products_compare_by_identity(self):
        assert biscuits() != biscuits()
