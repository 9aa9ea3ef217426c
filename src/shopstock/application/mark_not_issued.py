"""Application service: courier could not hand the order over.

The order leaves the courier's queue as NOT_ISSUED and its held stock
becomes available again.
"""

from __future__ import annotations

import logging

from shopstock.domain.exceptions import EntityNotFoundError
from shopstock.domain.repository.order_repository import OrderRepository
from shopstock.domain.service.reservation_engine import ReservationEngine

logger = logging.getLogger(__name__)


class MarkNotIssuedHandler:

    def __init__(self, order_repo: OrderRepository, engine: ReservationEngine) -> None:
        self._order_repo = order_repo
        self._engine = engine

    async def handle(self, order_id: int) -> None:
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.mark_not_issued()
        await self._engine.release_reservation(order.stock_items(), order.id)
        await self._order_repo.save(order)
        logger.info("Order #%s not issued", order.id)
