"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money, Quantity, Weight


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["nan", "NaN", "inf", "-Infinity", "sNaN"])
    def test_of_factory_rejects_non_finite(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("NaN"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction(self):
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_decimal(self):
        assert Money.of("10") * Decimal("1.1") == Money.of("11")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("10") * 1.5

    def test_str_has_no_forced_precision(self):
        assert str(Money.of("400")) == "400"
        assert str(Money.of("11.0")) == "11"
        assert str(Money.of("4.50")) == "4.5"
        assert str(Money.of("0.00")) == "0"

    def test_str_never_uses_exponent(self):
        assert str(Money.of("1000")) == "1000"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")

    def test_equality_ignores_trailing_zeros(self):
        assert Money.of("411") == Money.of("411.00")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Weight ───────────────────────────────────────────────────────────────────


class TestWeight:

    def test_of_factory(self):
        assert Weight.of("0.2").kg == Decimal("0.2")

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Weight.of(0)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="Invalid weight"):
            Weight.of("nan")

    def test_infinite_decimal_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Weight(Decimal("Infinity"))

    def test_str(self):
        assert str(Weight.of("0.70")) == "0.7kg"
