"""CLI commands for the courier roster."""

from __future__ import annotations

import click

from shopstock.application.couriers import (
    AddCourierHandler,
    ListActiveCouriersHandler,
    SetCourierActiveHandler,
)
from shopstock.infrastructure.cli.runner import run_with_container


@click.command("add")
@click.option("--id", "courier_id", required=True, type=int, help="Courier ID.")
@click.option("--tg-id", "tg_id", required=True, type=int, help="Chat account ID.")
@click.option("--name", default="Courier", show_default=True, help="Display name.")
def courier_add(courier_id: int, tg_id: int, name: str) -> None:
    """Register a courier."""

    async def action(c):
        return await AddCourierHandler(c.couriers).handle(courier_id, tg_id, name)

    courier = run_with_container(action)
    click.echo(f"Courier #{courier.courier_id} '{courier.name}' registered (chat {courier.tg_id})")


@click.command("list")
def courier_list() -> None:
    """List active couriers."""

    async def action(c):
        return await ListActiveCouriersHandler(c.couriers).handle()

    couriers = run_with_container(action)
    if not couriers:
        click.echo("No active couriers.")
        return
    for courier in couriers:
        click.echo(f"#{courier.courier_id:<5} {courier.name:<20} chat {courier.tg_id}")


@click.command("deactivate")
@click.option("--id", "courier_id", required=True, type=int, help="Courier ID or chat ID.")
def courier_deactivate(courier_id: int) -> None:
    """Take a courier off the roster; they can no longer be assigned orders."""

    async def action(c):
        await SetCourierActiveHandler(c.couriers).handle(courier_id, active=False)

    run_with_container(action)
    click.echo(f"Courier {courier_id} deactivated")


@click.command("activate")
@click.option("--id", "courier_id", required=True, type=int, help="Courier ID or chat ID.")
def courier_activate(courier_id: int) -> None:
    """Put a courier back on the roster."""

    async def action(c):
        await SetCourierActiveHandler(c.couriers).handle(courier_id, active=True)

    run_with_container(action)
    click.echo(f"Courier {courier_id} activated")
