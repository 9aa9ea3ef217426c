"""CLI commands for stock levels and manual reservation maintenance."""

from __future__ import annotations

import click

from shopstock.application.set_stock import SetStockHandler
from shopstock.application.show_stock import ShowStockHandler
from shopstock.infrastructure.cli.runner import parse_stock_items, run_with_container


@click.command("set")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity in stock.")
def stock_set(product_id: int, quantity: int) -> None:
    """Overwrite the stock level of a product."""

    async def action(c):
        await SetStockHandler(c.products).handle(product_id, quantity)

    run_with_container(action)
    click.echo(f"Stock for product #{product_id} set to {quantity}")


@click.command("show")
def stock_show() -> None:
    """Show stock, reserved and free quantities."""

    async def action(c):
        return await ShowStockHandler(c.products, c.engine).handle()

    lines = run_with_container(action)
    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<24} {'Stock':>8} {'Reserved':>10} {'Free':>8}")
    click.echo("-" * 60)
    for line in lines:
        click.echo(
            f"{line.product_id:<6} {line.title:<24} {line.available:>8} "
            f"{line.reserved:>10} {line.free:>8}"
        )


@click.command("check")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", required=True, type=int, help="Quantity wanted.")
def stock_check(product_id: int, qty: int) -> None:
    """Tell whether QTY units of a product are free right now."""

    async def action(c):
        return await c.engine.validate_stock(product_id, qty)

    ok = run_with_container(action)
    click.echo("available" if ok else "not available")


@click.command("reserve")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--order", "order_id", type=int, default=None, help="Order ID (optional).")
def stock_reserve(items: str, order_id: int | None) -> None:
    """Hold stock for a batch of items."""
    stock_items = parse_stock_items(items)

    async def action(c):
        await c.engine.reserve_items(stock_items, order_id)
        return c.engine.qty_reserved_snapshot()

    snapshot = run_with_container(action)
    click.echo(f"Reserved. Now held: {snapshot}")


@click.command("release")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--order", "order_id", type=int, default=None, help="Order ID (optional).")
def stock_release(items: str, order_id: int | None) -> None:
    """Release held stock for a batch of items."""
    stock_items = parse_stock_items(items)

    async def action(c):
        await c.engine.release_reservation(stock_items, order_id)
        return c.engine.qty_reserved_snapshot()

    snapshot = run_with_container(action)
    click.echo(f"Released. Now held: {snapshot}")


@click.command("deduct")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def stock_deduct(items: str) -> None:
    """Permanently deduct stock for a batch of items."""
    stock_items = parse_stock_items(items)

    async def action(c):
        await c.engine.final_deduction(stock_items)

    run_with_container(action)
    click.echo(f"Deducted {len(stock_items)} item(s)")
