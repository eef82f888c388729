"""Domain service: Checkout.

Coordinates the one cross-aggregate transaction in the system: a cart is
paid for by a customer, stock leaves the catalog, and the shipment notice
and receipt are written out.

The protocol is strictly validate-then-mutate. Every check (empty cart,
expiry, stock, affordability) runs before the first ``reduce_stock()``,
so a rejected checkout leaves customer and products exactly as they were.
Once the commit phase starts nothing is expected to fail.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import structlog

from pos.domain.exceptions import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    OutOfStockError,
)
from pos.domain.model.cart import Cart
from pos.domain.model.clock import Clock, system_clock
from pos.domain.model.customer import Customer
from pos.domain.model.documents import Receipt, ReceiptLine, ShipmentNotice
from pos.domain.model.value_objects import Money
from pos.domain.service.shipping_service import Emitter, ShippingService

logger = structlog.get_logger(__name__)


class CheckoutStage(Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    PRICED = "PRICED"
    COMMITTING = "COMMITTING"
    SHIPPING = "SHIPPING"
    REPORTING = "REPORTING"
    DONE = "DONE"
    REJECTED = "REJECTED"


_TRANSITIONS: dict[CheckoutStage, frozenset[CheckoutStage]] = {
    CheckoutStage.IDLE: frozenset({CheckoutStage.VALIDATING}),
    CheckoutStage.VALIDATING: frozenset({CheckoutStage.PRICED, CheckoutStage.REJECTED}),
    CheckoutStage.PRICED: frozenset({CheckoutStage.COMMITTING, CheckoutStage.REJECTED}),
    CheckoutStage.COMMITTING: frozenset({CheckoutStage.SHIPPING}),
    CheckoutStage.SHIPPING: frozenset({CheckoutStage.REPORTING}),
    CheckoutStage.REPORTING: frozenset({CheckoutStage.DONE}),
    CheckoutStage.DONE: frozenset({CheckoutStage.VALIDATING}),
    CheckoutStage.REJECTED: frozenset({CheckoutStage.VALIDATING}),
}


@dataclass(frozen=True)
class CheckoutResult:
    receipt: Receipt
    shipment: ShipmentNotice | None
    stage: CheckoutStage

    @property
    def total(self) -> Money:
        return self.receipt.total


class CheckoutService:

    def __init__(
        self,
        emit: Emitter,
        shipping: ShippingService | None = None,
        clock: Clock = system_clock,
    ) -> None:
        self._emit = emit
        self._shipping = shipping or ShippingService(emit)
        self._clock = clock
        self.stage = CheckoutStage.IDLE

    def checkout(self, customer: Customer, cart: Cart) -> CheckoutResult:
        """Validate, charge, decrement stock, ship, and print the receipt.

        Raises:
            EmptyCartError: the cart has no lines.
            ExpiredProductError: a product expired since it was added.
            OutOfStockError: a product no longer has enough stock.
            InsufficientBalanceError: the customer cannot pay the total.
        """
        self._advance(CheckoutStage.VALIDATING)
        try:
            return self._run(customer, cart)
        finally:
            # An unexpected error mid-protocol must not wedge the service.
            if self.stage not in (CheckoutStage.DONE, CheckoutStage.REJECTED):
                logger.warning("checkout.aborted", stage=self.stage.value)
                self.stage = CheckoutStage.IDLE

    def _run(self, customer: Customer, cart: Cart) -> CheckoutResult:
        try:
            self._validate(cart, self._clock())
            subtotal = cart.subtotal()
            shipping = cart.shipping_fee()
            total = subtotal + shipping
            self._advance(CheckoutStage.PRICED)

            if not customer.can_afford(total):
                raise InsufficientBalanceError("Insufficient customer balance.")
        except Exception as exc:
            self._advance(CheckoutStage.REJECTED)
            logger.info(
                "checkout.rejected",
                customer=customer.name,
                reason=type(exc).__name__,
                message=str(exc),
            )
            raise

        # Commit phase: all checks passed, no failure is expected from here.
        self._advance(CheckoutStage.COMMITTING)
        for item in cart.items:
            item.product.reduce_stock(item.quantity.value)
        customer.debit(total)

        self._advance(CheckoutStage.SHIPPING)
        manifest = cart.shippable_manifest()
        notice = self._shipping.ship(manifest) if manifest else None

        self._advance(CheckoutStage.REPORTING)
        receipt = Receipt(
            lines=tuple(
                ReceiptLine(
                    quantity=item.quantity.value,
                    name=item.product.name,
                    line_total=item.line_total,
                )
                for item in cart.items
            ),
            subtotal=subtotal,
            shipping=shipping,
        )
        for text in receipt.render():
            self._emit(text)

        self._advance(CheckoutStage.DONE)
        logger.info(
            "checkout.completed",
            customer=customer.name,
            total=str(total),
            remaining_balance=str(customer.balance),
        )
        return CheckoutResult(receipt=receipt, shipment=notice, stage=self.stage)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate(cart: Cart, now: datetime) -> None:
        if cart.is_empty():
            raise EmptyCartError()

        # Demand is summed per product object so duplicate lines cannot
        # overdraw stock during the commit phase.
        demanded: dict[int, int] = {}
        for item in cart.items:
            product = item.product
            if product.is_expired(now):
                raise ExpiredProductError(product.name)
            key = id(product)
            demanded[key] = demanded.get(key, 0) + item.quantity.value
            if demanded[key] > product.stock:
                raise OutOfStockError(product.name)

    def _advance(self, stage: CheckoutStage) -> None:
        allowed = _TRANSITIONS[self.stage]
        if stage not in allowed:
            raise RuntimeError(
                f"Illegal checkout transition {self.stage.value} -> {stage.value}"
            )
        logger.debug("checkout.stage", source=self.stage.value, target=stage.value)
        self.stage = stage
