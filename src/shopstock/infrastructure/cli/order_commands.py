"""CLI commands for orders and the courier queue."""

from __future__ import annotations

import click

from shopstock.application.cancel_order import CancelOrderHandler
from shopstock.application.courier_orders import (
    AssignCourierHandler,
    ListCourierOrdersHandler,
)
from shopstock.application.deliver_order import DeliverOrderHandler
from shopstock.application.dto import OrderDTO, OrderItemSpec
from shopstock.application.mark_not_issued import MarkNotIssuedHandler
from shopstock.application.place_order import PlaceOrderHandler
from shopstock.application.show_order import ShowOrderHandler
from shopstock.infrastructure.cli.runner import parse_items, run_with_container


def _echo_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.user_id}")
    if dto.courier_id is not None:
        click.echo(f"Courier:  {dto.courier_id}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.delivered_at:
        click.echo(f"Delivered: {dto.delivered_at}")
    click.echo()
    click.echo(f"{'ID':<6} {'Title':<24} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo("-" * 67)
    for item in dto.items:
        click.echo(
            f"{item.product_id:<6} {item.title:<24} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo("-" * 67)
    click.echo(f"{'TOTAL':>52} {dto.total:>14}")


@click.command("place")
@click.option("--user", "user_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_place(user_id: int, items: str) -> None:
    """Place an order and reserve its stock."""
    specs = [OrderItemSpec(pid, qty) for pid, qty in parse_items(items)]

    async def action(c):
        handler = PlaceOrderHandler(c.orders, c.products, c.engine)
        return await handler.handle(user_id=user_id, item_specs=specs)

    _echo_order(run_with_container(action))


@click.command("show")
@click.argument("order_id", type=int)
def order_show(order_id: int) -> None:
    """Show an order."""

    async def action(c):
        return await ShowOrderHandler(c.orders).handle(order_id)

    _echo_order(run_with_container(action))


@click.command("assign")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--courier", "courier_id", required=True, type=int, help="Courier ID or chat ID.")
def order_assign(order_id: int, courier_id: int) -> None:
    """Assign an order to a courier."""

    async def action(c):
        await AssignCourierHandler(c.orders, c.couriers).handle(order_id, courier_id)

    run_with_container(action)
    click.echo(f"Order #{order_id} assigned to courier {courier_id}")


@click.command("deliver")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--courier", "courier_id", required=True, type=int, help="Courier ID or chat ID.")
def order_deliver(order_id: int, courier_id: int) -> None:
    """Mark an order as handed over and deduct its stock."""

    async def action(c):
        await DeliverOrderHandler(c.orders, c.engine, c.couriers).handle(order_id, courier_id)

    run_with_container(action)
    click.echo(f"Order #{order_id} delivered")


@click.command("not-issued")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_not_issued(order_id: int) -> None:
    """Mark an order as not handed over and free its stock."""

    async def action(c):
        await MarkNotIssuedHandler(c.orders, c.engine).handle(order_id)

    run_with_container(action)
    click.echo(f"Order #{order_id} marked as not issued")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
def order_cancel(order_id: int) -> None:
    """Cancel an open order and free its stock."""

    async def action(c):
        await CancelOrderHandler(c.orders, c.engine).handle(order_id)

    run_with_container(action)
    click.echo(f"Order #{order_id} cancelled")


@click.command("courier")
@click.option("--courier", "courier_id", required=True, type=int, help="Courier ID or chat ID.")
def order_courier(courier_id: int) -> None:
    """List a courier's open orders, newest first."""

    async def action(c):
        return await ListCourierOrdersHandler(c.orders, c.couriers).handle(courier_id)

    orders = run_with_container(action)
    if not orders:
        click.echo("No orders")
        return
    for dto in orders:
        click.echo(f"#{dto.id} user {dto.user_id} · {dto.status} · {dto.total}")
