import logging

import click

from catalog.config import get_log_level
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_edit,
    product_list,
    product_show,
)
from catalog.logging import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Product catalog management."""
    configure_logging(logging.DEBUG if verbose else get_log_level())


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_create)
product.add_command(product_edit)
product.add_command(product_delete)
