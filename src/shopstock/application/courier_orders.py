"""Application services for the courier queue: list and assign."""

from __future__ import annotations

from shopstock.application.dto import OrderDTO, order_to_dto
from shopstock.domain.exceptions import (
    CourierNotFoundError,
    EntityNotFoundError,
    ValidationError,
)
from shopstock.domain.repository.courier_repository import CourierRepository
from shopstock.domain.repository.order_repository import OrderRepository

COURIER_QUEUE_LIMIT = 100


class ListCourierOrdersHandler:
    """Open orders of whoever is asking, newest first.

    The caller may identify with either roster id; orders filed under the
    other id are included.  An id missing from the roster still sees the
    orders assigned directly to it.
    """

    def __init__(self, order_repo: OrderRepository, courier_repo: CourierRepository) -> None:
        self._order_repo = order_repo
        self._courier_repo = courier_repo

    async def handle(self, courier_id: int) -> list[OrderDTO]:
        courier = await self._courier_repo.find(courier_id)
        ids = set(courier.ids) if courier is not None else {courier_id}
        orders = await self._order_repo.list_for_courier(ids, limit=COURIER_QUEUE_LIMIT)
        return [order_to_dto(order) for order in orders]


class AssignCourierHandler:

    def __init__(self, order_repo: OrderRepository, courier_repo: CourierRepository) -> None:
        self._order_repo = order_repo
        self._courier_repo = courier_repo

    async def handle(self, order_id: int, courier_id: int) -> None:
        courier = await self._courier_repo.find(courier_id)
        if courier is None:
            raise CourierNotFoundError(courier_id)
        if not courier.active:
            raise ValidationError(f"Courier #{courier.courier_id} is not active")

        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        order.assign_courier(courier.courier_id)
        await self._order_repo.save(order)
