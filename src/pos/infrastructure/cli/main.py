import click

from pos.infrastructure.cli.catalog_commands import catalog_list
from pos.infrastructure.cli.checkout_commands import checkout
from pos.infrastructure.cli.demo_commands import demo
from pos.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """POS — point-of-sale checkout"""
    configure_logging()


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(checkout)
cli.add_command(demo)
