"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from shopstock.application.add_product import AddProductHandler
from shopstock.infrastructure.cli.runner import run_with_container


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 450.00).")
@click.option("--category", default="general", show_default=True, help="Category.")
@click.option("--qty", "qty_available", default=0, type=int, help="Initial stock.")
def product_add(title: str, price: str, category: str, qty_available: int) -> None:
    """Add a new product to the catalog."""

    async def action(c):
        return await AddProductHandler(c.products).handle(
            title=title, price=price, category=category, qty_available=qty_available
        )

    product = run_with_container(action)
    click.echo(
        f"Product #{product.id} '{product.title}' added at {product.price} "
        f"({product.qty_available} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""

    async def action(c):
        return await c.products.list_all()

    products = run_with_container(action)
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<24} {'Category':<12} {'Price':>14} {'Stock':>7}")
    click.echo("-" * 67)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.title:<24} {p.category:<12} {str(p.price):>14} "
            f"{p.qty_available:>7}"
        )
