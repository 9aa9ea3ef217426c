"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / bot flows and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopstock.domain.model.courier import Courier
from shopstock.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: int
    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "150.00 RUB"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: int
    status: str
    courier_id: int | None
    items: list[OrderLineItemDTO]
    total: str
    created_at: str
    delivered_at: str | None


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        courier_id=order.courier_id,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                title=item.title,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        delivered_at=(
            order.delivered_at.strftime("%Y-%m-%d %H:%M UTC")
            if order.delivered_at
            else None
        ),
    )


@dataclass(frozen=True)
class CourierDTO:
    courier_id: int
    tg_id: int
    name: str
    active: bool


def courier_to_dto(courier: Courier) -> CourierDTO:
    return CourierDTO(
        courier_id=courier.courier_id,
        tg_id=courier.tg_id,
        name=courier.name,
        active=courier.active,
    )
