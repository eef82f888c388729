"""CLI command that replays the walkthrough scenarios.

Each scenario gets a fresh demo catalog and a fresh customer, so the
scenarios are independent of each other and of the order they run in.
"""

from __future__ import annotations

from typing import Callable

import click

from pos.domain.exceptions import DomainException, EntityNotFoundError
from pos.domain.model.cart import Cart
from pos.domain.model.clock import system_clock
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money
from pos.infrastructure.bootstrap import checkout_service
from pos.infrastructure.catalog.demo_catalog import demo_products, expired_cheese
from pos.infrastructure.catalog.memory_catalog import InMemoryProductRepository

Scenario = Callable[[InMemoryProductRepository], tuple[Customer, Cart]]


def _fill(catalog: InMemoryProductRepository, lines: list[tuple[str, int]]) -> Cart:
    cart = Cart()
    for name, qty in lines:
        product = catalog.get_by_name(name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{name}'")
        cart.add(product, qty)
    return cart


def _mixed(catalog):
    cart = _fill(catalog, [("Cheese", 2), ("Biscuits", 1), ("Scratch Card", 1)])
    return Customer("Kerolos", Money.of("2000")), cart


def _insufficient_balance(catalog):
    cart = _fill(
        catalog, [("Cheese", 2), ("Biscuits", 1), ("Scratch Card", 1), ("TV", 1)]
    )
    return Customer("Kerolos", Money.of("1000")), cart


def _empty_cart(catalog):
    return Customer("Kerolos", Money.of("2000")), Cart()


def _expired(catalog):
    cart = Cart()
    cart.add(expired_cheese(system_clock()), 1)
    return Customer("Kerolos", Money.of("2000")), cart


def _stock_exceeded(catalog):
    return Customer("Kerolos", Money.of("2000")), _fill(catalog, [("Biscuits", 6)])


def _digital_only(catalog):
    return Customer("Kerolos", Money.of("2000")), _fill(catalog, [("Scratch Card", 3)])


SCENARIOS: dict[str, Scenario] = {
    "mixed": _mixed,
    "insufficient-balance": _insufficient_balance,
    "empty-cart": _empty_cart,
    "expired": _expired,
    "stock-exceeded": _stock_exceeded,
    "digital-only": _digital_only,
}


@click.command("demo")
@click.option(
    "--scenario",
    "names",
    type=click.Choice(list(SCENARIOS)),
    multiple=True,
    help="Scenario to run (repeatable). Runs all of them by default.",
)
def demo(names: tuple[str, ...]) -> None:
    """Replay the walkthrough scenarios against the demo catalog."""
    for name in names or tuple(SCENARIOS):
        click.echo(f"\n=== {name} ===")
        catalog = InMemoryProductRepository(demo_products())
        try:
            customer, cart = SCENARIOS[name](catalog)
            checkout_service().checkout(customer, cart)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
            continue
        click.echo(f"Remaining balance\t{customer.balance}")
