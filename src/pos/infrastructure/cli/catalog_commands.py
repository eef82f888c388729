"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from pos.application.show_catalog import ShowCatalogHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import product_repository
from pos.infrastructure.cli.options import catalog_option


@click.command("list")
@catalog_option
def catalog_list(catalog_path: Path | None) -> None:
    """List all products in the catalog."""
    try:
        lines = ShowCatalogHandler(product_repository(catalog_path)).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products found.")
        return

    click.echo(
        f"{'Name':<20} {'Kind':<11} {'Price':>10} {'Stock':>6} {'Weight':>8}  Expires"
    )
    click.echo("-" * 78)
    for line in lines:
        click.echo(
            f"{line.name:<20} {line.kind:<11} {line.price:>10} {line.stock:>6} "
            f"{line.weight:>8}  {line.expires_at}".rstrip()
        )
