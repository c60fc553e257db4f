"""CLI commands for the Product entity."""

from __future__ import annotations

import dataclasses
from decimal import Decimal, InvalidOperation

import click

from catalog.application.products_manager import ProductsManager
from catalog.domain.model.product import Product
from catalog.infrastructure.cli._runtime import run_manager
from catalog.infrastructure.settings import Settings


def _parse_price(ctx: click.Context, param: click.Parameter, value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a decimal number.")


def _print_table(products: list[Product]) -> None:
    click.echo(f"{'Code':<10} {'Name':<20} {'Country':<15} {'Price':>10} {'Qty':>6}")
    click.echo("-" * 65)
    for p in products:
        click.echo(
            f"{p.product_code:<10} {p.product_name:<20} {p.origin_country:<15} "
            f"{p.price:>10.2f} {p.quantity:>6}"
        )


@click.command("add")
@click.option("--code", required=True, help="Unique product code.")
@click.option("--name", required=True, help="Product name.")
@click.option("--country", required=True, help="Origin country.")
@click.option("--price", required=True, callback=_parse_price, help="Price (e.g. 1.25).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--description", default=None, help="Free-text description.")
@click.pass_obj
def product_add(
    settings: Settings,
    code: str,
    name: str,
    country: str,
    price: Decimal,
    quantity: int,
    description: str | None,
) -> None:
    """Add a new product to the catalog."""
    product = Product(
        origin_country=country,
        product_name=name,
        product_code=code,
        price=price,
        quantity=quantity,
        description=description,
    )
    run_manager(settings, lambda manager: manager.add(product))
    click.echo(f"Product '{product.product_code}' added.")


@click.command("update")
@click.option("--code", required=True, help="Code of the product to change.")
@click.option("--name", default=None, help="New product name.")
@click.option("--country", default=None, help="New origin country.")
@click.option("--price", default=None, callback=_parse_price, help="New price.")
@click.option("--quantity", default=None, type=int, help="New stock quantity.")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    settings: Settings,
    code: str,
    name: str | None,
    country: str | None,
    price: Decimal | None,
    quantity: int | None,
    description: str | None,
) -> None:
    """Update a product; omitted fields keep their stored values."""
    changes = {
        "product_name": name,
        "origin_country": country,
        "price": price,
        "quantity": quantity,
        "description": description,
    }
    changes = {field: value for field, value in changes.items() if value is not None}

    async def _update(manager: ProductsManager) -> None:
        current = await manager.get_specific(code)
        await manager.update(dataclasses.replace(current, **changes))

    run_manager(settings, _update)
    click.echo(f"Product '{code}' updated.")


@click.command("delete")
@click.option("--code", required=True, help="Code of the product to remove.")
@click.pass_obj
def product_delete(settings: Settings, code: str) -> None:
    """Remove a product from the catalog."""
    run_manager(settings, lambda manager: manager.delete(code))
    click.echo(f"Product '{code}' deleted.")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    products = run_manager(settings, lambda manager: manager.get_all())
    _print_table(products)


@click.command("show")
@click.option("--code", required=True, help="Product code.")
@click.pass_obj
def product_show(settings: Settings, code: str) -> None:
    """Show every field of one product."""
    p = run_manager(settings, lambda manager: manager.get_specific(code))
    click.echo(f"Code:        {p.product_code}")
    click.echo(f"Name:        {p.product_name}")
    click.echo(f"Country:     {p.origin_country}")
    click.echo(f"Price:       {p.price:.2f}")
    click.echo(f"Quantity:    {p.quantity}")
    click.echo(f"Description: {p.description or ''}")


@click.command("search")
@click.option("--country", required=True, help="Exact origin country to match.")
@click.pass_obj
def product_search(settings: Settings, country: str) -> None:
    """List the products that come from a country."""
    products = run_manager(settings, lambda manager: manager.search_by_origin_country(country))
    _print_table(products)
