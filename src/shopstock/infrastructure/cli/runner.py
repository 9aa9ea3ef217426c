"""Glue between synchronous click commands and the async application layer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from shopstock.domain.exceptions import DomainException
from shopstock.domain.model.reservation import StockItem
from shopstock.infrastructure.bootstrap import Container, open_container

T = TypeVar("T")


def run_with_container(action: Callable[[Container], Awaitable[T]]) -> T:
    """Open the store, run ``action`` once, close the store.

    Domain errors become click errors so the user sees a one-line message.
    """

    async def _main() -> T:
        async with open_container() as container:
            return await action(container)

    try:
        return asyncio.run(_main())
    except DomainException as exc:
        raise click.ClickException(str(exc))


def parse_items(raw: str) -> list[tuple[int, int]]:
    """Parse '1:3,2:5' into (product_id, quantity) pairs."""
    pairs: list[tuple[int, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        pid_str, qty_str = pair.split(":", 1)
        try:
            pairs.append((int(pid_str), int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'; both parts must be integers.")
    return pairs


def parse_stock_items(raw: str) -> list[StockItem]:
    try:
        return [StockItem(pid, qty) for pid, qty in parse_items(raw)]
    except DomainException as exc:
        raise click.BadParameter(str(exc))
