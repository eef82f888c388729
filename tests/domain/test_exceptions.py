"""Tests for the domain error taxonomy."""

import pytest

from pos.domain.exceptions import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)


class TestErrorTaxonomy:

    @pytest.mark.parametrize(
        "error, message",
        [
            (EmptyCartError(), "Cart is empty."),
            (ExpiredProductError("Cheese"), "Cheese is expired."),
            (OutOfStockError("Biscuits"), "Biscuits is out of stock."),
            (InsufficientStockError(), "Insufficient stock."),
            (InsufficientBalanceError(), "Insufficient balance."),
        ],
    )
    def test_messages(self, error, message):
        assert isinstance(error, ValidationError)
        assert str(error) == message

    @pytest.mark.parametrize(
        "cls",
        [
            EmptyCartError,
            ExpiredProductError,
            OutOfStockError,
            InsufficientStockError,
            InsufficientBalanceError,
        ],
    )
    def test_every_error_is_documented(self, cls):
        assert cls.__doc__ and cls.__doc__.strip()
