"""Application service: Deliver Order use case.

Invoked when a courier reports the order as handed over.  Stock is
deducted for good, the order's reservation is released (the units are no
longer merely held) and the order is saved as DELIVERED.

Lines are settled one at a time: each deducted line is marked on the
order, its hold released and the order saved before the next line is
touched.  If a deduction fails with NegativeStockError the order stays
open with the settled lines recorded, so retrying the delivery only
deducts what is still outstanding.
"""

from __future__ import annotations

import logging

from shopstock.domain.exceptions import EntityNotFoundError
from shopstock.domain.model.reservation import StockItem
from shopstock.domain.repository.courier_repository import CourierRepository
from shopstock.domain.repository.order_repository import OrderRepository
from shopstock.domain.service.reservation_engine import ReservationEngine

logger = logging.getLogger(__name__)


class DeliverOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        engine: ReservationEngine,
        courier_repo: CourierRepository | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._engine = engine
        self._courier_repo = courier_repo

    async def handle(self, order_id: int, courier_id: int) -> None:
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        if self._courier_repo is not None:
            courier = await self._courier_repo.find(courier_id)
            # Either roster id of the assigned courier may report the delivery
            if courier is not None and order.courier_id in courier.ids:
                courier_id = order.courier_id

        # Validates the transition before any stock moves
        order.check_deliverable(courier_id)

        for line in order.pending_lines():
            item = StockItem(line.product_id, line.quantity.value)
            await self._engine.final_deduction([item])
            line.deducted = True
            # A product may appear on several lines; its hold goes with the last one
            if all(other.product_id != line.product_id for other in order.pending_lines()):
                await self._engine.release_reservation([item], order.id)
            await self._order_repo.save(order)

        order.mark_delivered(courier_id)
        await self._order_repo.save(order)
        logger.info("Order #%s delivered by courier %s", order.id, courier_id)
