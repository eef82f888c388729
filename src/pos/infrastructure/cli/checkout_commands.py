"""CLI command for the checkout transaction."""

from __future__ import annotations

from pathlib import Path

import click

from pos.application.checkout import CheckoutHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import checkout_service, product_repository
from pos.infrastructure.cli.options import catalog_option, parse_items


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Prepaid balance (e.g. 2000).")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@catalog_option
def checkout(customer: str, balance: str, items: str, catalog_path: Path | None) -> None:
    """Check out a cart: charge the customer, ship, print the receipt."""
    specs = parse_items(items)

    try:
        handler = CheckoutHandler(
            product_repo=product_repository(catalog_path),
            checkout_service=checkout_service(),
        )
        handler.handle(customer_name=customer, balance=balance, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))
