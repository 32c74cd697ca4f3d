"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from stockroom.application.dto import ProductPayload, StockPayload
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.product import Category, Product
from stockroom.infrastructure.bootstrap import product_store

_CATEGORY = click.Choice([c.value for c in Category], case_sensitive=False)


def _to_category(value: str) -> Category:
    for category in Category:
        if category.value.lower() == value.lower():
            return category
    raise click.BadParameter(f"Unknown category '{value}'.")


def _format_timestamp(ns: int | None) -> str:
    if ns is None:
        return "-"
    moment = datetime.fromtimestamp(ns / 1_000_000_000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M UTC")


def _display_product(product: Product) -> None:
    """Shared formatting for displaying a single product."""
    click.echo(f"Product #{product.id}  '{product.name}'")
    click.echo(f"Category: {product.category.value}")
    click.echo(f"Quantity: {product.quantity}")
    click.echo(f"Created:  {_format_timestamp(product.created_at)}")
    click.echo(f"Updated:  {_format_timestamp(product.updated_at)}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--category", default=Category.BAKERY.value, type=_CATEGORY, help="Product category.")
def product_add(name: str, quantity: int, category: str) -> None:
    """Add a new product to the inventory."""
    payload = ProductPayload(name=name, quantity=quantity, category=_to_category(category))
    product = product_store().add_product(payload)

    if product is None:
        raise click.ClickException(f"Product '{name}' could not be added")

    click.echo(f"Product #{product.id} '{product.name}' added with quantity {product.quantity}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
def product_show(product_id: int) -> None:
    """Show details of an existing product."""
    try:
        product = product_store().get_product(product_id).unwrap()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_stock(product_id: int) -> None:
    """Show the stock level of a product."""
    try:
        quantity = product_store().get_stock(product_id).unwrap()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(quantity))


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
@click.option("--category", required=True, type=_CATEGORY, help="New category.")
def product_update(product_id: int, name: str, quantity: int, category: str) -> None:
    """Replace a product's name, quantity and category."""
    payload = ProductPayload(name=name, quantity=quantity, category=_to_category(category))

    try:
        product = product_store().update_product(product_id, payload).unwrap()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated.")
    _display_product(product)


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to add.")
def product_restock(product_id: int, amount: int) -> None:
    """Add units to a product's stock."""
    try:
        product = product_store().add_quantity(product_id, StockPayload(amount)).unwrap()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} restocked, quantity now {product.quantity}")


@click.command("offload")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to take out.")
def product_offload(product_id: int, amount: int) -> None:
    """Take units out of a product's stock."""
    try:
        product = product_store().offload_quantity(product_id, StockPayload(amount)).unwrap()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} offloaded, quantity now {product.quantity}")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to remove.")
def product_remove(product_id: int) -> None:
    """Remove a product from the inventory."""
    try:
        product = product_store().remove_product(product_id).unwrap()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' removed.")


@click.command("list")
def product_list() -> None:
    """List all products in the inventory."""
    products = product_store().list_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<10} {'Quantity':>10}")
    click.echo("-" * 49)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category.value:<10} {p.quantity:>10}")
