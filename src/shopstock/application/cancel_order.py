"""Application service: Cancel Order use case.

Only open orders (pending or with a courier) can be cancelled.  Their
reservation is released before the order is saved as CANCELLED.
"""

from __future__ import annotations

from shopstock.domain.exceptions import EntityNotFoundError
from shopstock.domain.repository.order_repository import OrderRepository
from shopstock.domain.service.reservation_engine import ReservationEngine


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository, engine: ReservationEngine) -> None:
        self._order_repo = order_repo
        self._engine = engine

    async def handle(self, order_id: int) -> None:
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.cancel()
        await self._engine.release_reservation(order.stock_items(), order.id)
        await self._order_repo.save(order)
