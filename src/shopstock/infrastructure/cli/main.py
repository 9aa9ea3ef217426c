import logging

import click

from shopstock.infrastructure.cli.courier_commands import (
    courier_activate,
    courier_add,
    courier_deactivate,
    courier_list,
)
from shopstock.infrastructure.cli.order_commands import (
    order_assign,
    order_cancel,
    order_courier,
    order_deliver,
    order_not_issued,
    order_place,
    order_show,
)
from shopstock.infrastructure.cli.product_commands import product_add, product_list
from shopstock.infrastructure.cli.stock_commands import (
    stock_check,
    stock_deduct,
    stock_release,
    stock_reserve,
    stock_set,
    stock_show,
)
from shopstock.infrastructure.config import get_settings


@click.group()
def cli() -> None:
    """shopstock — orders, couriers and stock for a delivery shop"""
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def courier() -> None:
    """Manage the courier roster."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage stock and reservations."""


# Register subcommands
courier.add_command(courier_activate)
courier.add_command(courier_add)
courier.add_command(courier_deactivate)
courier.add_command(courier_list)
order.add_command(order_assign)
order.add_command(order_cancel)
order.add_command(order_courier)
order.add_command(order_deliver)
order.add_command(order_not_issued)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
stock.add_command(stock_check)
stock.add_command(stock_deduct)
stock.add_command(stock_release)
stock.add_command(stock_reserve)
stock.add_command(stock_set)
stock.add_command(stock_show)
