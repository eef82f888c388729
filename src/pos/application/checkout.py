"""Application service: Checkout use case.

Resolves product names against the catalog, fills a cart, and hands the
cart and customer to the domain checkout service. This is the only place
that coordinates the catalog with the checkout transaction.
"""

from __future__ import annotations

from pos.application.dto import CartItemSpec, CheckoutDTO
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.checkout_service import CheckoutService


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        checkout_service: CheckoutService,
    ) -> None:
        self._product_repo = product_repo
        self._checkout_service = checkout_service

    def handle(
        self,
        customer_name: str,
        balance: str,
        item_specs: list[CartItemSpec],
    ) -> CheckoutDTO:
        """Check out a cart for a walk-in customer.

        Steps:
        1. Build the customer from name and prepaid balance.
        2. Resolve each product name (fail if not found) and add it to the
           cart; ``Cart.add`` performs the preliminary stock check.
        3. Run the checkout transaction, which prints notice and receipt.
        """
        customer = Customer(name=customer_name, balance=Money.of(balance))
        cart = Cart()

        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )
            cart.add(product, spec.quantity)

        result = self._checkout_service.checkout(customer, cart)

        return CheckoutDTO(
            customer_name=customer.name,
            subtotal=str(result.receipt.subtotal),
            shipping=str(result.receipt.shipping),
            total=str(result.total),
            remaining_balance=str(customer.balance),
            shipped=result.shipment is not None,
        )
