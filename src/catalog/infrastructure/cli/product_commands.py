"""CLI commands for the Product entity."""

from __future__ import annotations

import click

from catalog.application.model_state import ModelState, bind_product
from catalog.application.outcomes import ViewWithData
from catalog.application.product_service import ProductService
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository, product_service
from catalog.infrastructure.cli.views import render


def _invalid(state: ModelState) -> click.ClickException:
    lines = "\n".join(f"  {line}" for line in state.messages())
    return click.ClickException(f"Invalid product:\n{lines}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    service = product_service()
    render(service.list_all(), service)


@click.command("show")
@click.option("--id", "product_id", type=int, default=None, help="Product ID.")
def product_show(product_id: int | None) -> None:
    """Show a single product (lists the catalog when no ID is given)."""
    service = product_service()
    render(service.get_detail(product_id), service)


@click.command("create")
@click.option("--id", "product_id", type=int, default=None, help="Product ID (default: next free ID).")
@click.option("--name", default=None, help="Product name.")
@click.option("--price", default=None, help="Price (e.g. 15.00).")
@click.option("--stock", default=None, help="Quantity in stock.")
@click.option("--color", default=None, help="Color.")
def product_create(
    product_id: int | None,
    name: str | None,
    price: str | None,
    stock: str | None,
    color: str | None,
) -> None:
    """Add a new product, prompting for any field not given."""
    repo = product_repository()
    service = ProductService(product_repo=repo)
    render(service.prepare_create(), service)

    if name is None:
        name = click.prompt("Name", default="", show_default=False)
    if price is None:
        price = click.prompt("Price", default="0")
    if stock is None:
        stock = click.prompt("Stock", default="0")
    if color is None:
        color = click.prompt("Color", default="", show_default=False)

    candidate, state = bind_product(
        id=product_id if product_id is not None else repo.next_id(),
        name=name,
        price=price,
        stock=stock,
        color=color,
    )

    try:
        outcome = service.submit_create(candidate, state.is_valid)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(outcome, ViewWithData):
        raise _invalid(state)

    click.echo(f"Product #{candidate.id} '{candidate.name}' created.")
    render(outcome, service)


@click.command("edit")
@click.option("--id", "product_id", type=int, required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price.")
@click.option("--stock", default=None, help="New stock quantity.")
@click.option("--color", default=None, help="New color.")
def product_edit(
    product_id: int,
    name: str | None,
    price: str | None,
    stock: str | None,
    color: str | None,
) -> None:
    """Edit an existing product. Fields not given keep their value."""
    service = product_service()

    form = service.prepare_edit(product_id)
    if not isinstance(form, ViewWithData):
        render(form, service)
        return
    existing = form.model

    candidate, state = bind_product(
        id=existing.id,
        name=name if name is not None else existing.name,
        price=price if price is not None else existing.price,
        stock=stock if stock is not None else existing.stock,
        color=color if color is not None else existing.color,
    )

    try:
        outcome = service.submit_edit(product_id, candidate, state.is_valid)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(outcome, ViewWithData):
        raise _invalid(state)

    click.echo(f"Product #{product_id} updated.")
    render(outcome, service)


@click.command("delete")
@click.option("--id", "product_id", type=int, default=None, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def product_delete(product_id: int | None, yes: bool) -> None:
    """Delete a product after confirmation."""
    service = product_service()

    confirmation = service.prepare_delete(product_id)
    render(confirmation, service)

    if not yes:
        click.confirm("Delete this product?", abort=True)

    try:
        outcome = service.confirm_delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
    render(outcome, service)
