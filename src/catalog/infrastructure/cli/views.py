"""Text rendering of service outcomes.

The service decides *what* to show; this module decides *how* it looks
in a terminal. A Redirect is followed by running the target action, and
a NotFound becomes a ClickException (exit code 1).
"""

from __future__ import annotations

import click

from catalog.application.outcomes import (
    INDEX_ACTION,
    NotFound,
    Outcome,
    Redirect,
    ViewWithData,
)
from catalog.application.product_service import ProductService
from catalog.domain.model.product import Product


def render(outcome: Outcome, service: ProductService) -> None:
    if isinstance(outcome, Redirect):
        if outcome.action != INDEX_ACTION:
            raise click.ClickException(f"Unknown action '{outcome.action}'")
        render(service.list_all(), service)
        return

    if isinstance(outcome, NotFound):
        raise click.ClickException(f"Not found ({outcome.status_code})")

    view = _VIEWS.get(outcome.view)
    if view is None:
        raise click.ClickException(f"Unknown view '{outcome.view}'")
    view(outcome)


def _index(outcome: ViewWithData) -> None:
    products = outcome.model or []
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}  {'Color':<12}")
    click.echo("-" * 59)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.price:>10.2f} {p.stock:>7}  {p.color:<12}"
        )


def _display_product(product: Product) -> None:
    """Shared formatting for a single product."""
    click.echo(f"Product #{product.id}")
    click.echo(f"  Name:  {product.name}")
    click.echo(f"  Price: {product.price:.2f}")
    click.echo(f"  Stock: {product.stock}")
    click.echo(f"  Color: {product.color or '-'}")


def _details(outcome: ViewWithData) -> None:
    _display_product(outcome.model)


def _create(outcome: ViewWithData) -> None:
    if outcome.model is None:
        click.echo("New product")
    else:
        _display_product(outcome.model)


def _edit(outcome: ViewWithData) -> None:
    click.echo("Editing:")
    _display_product(outcome.model)


def _delete(outcome: ViewWithData) -> None:
    click.echo("About to delete:")
    _display_product(outcome.model)


_VIEWS = {
    "index": _index,
    "details": _details,
    "create": _create,
    "edit": _edit,
    "delete": _delete,
}
