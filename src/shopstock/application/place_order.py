"""Application service: Place Order use case.

Resolves the requested products, snapshots their prices into a new
order and holds stock for it through the reservation engine.  If the
hold cannot be taken the order is kept as CANCELLED so its id is never
reused, and the stock error propagates to the caller.
"""

from __future__ import annotations

import logging

from shopstock.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from shopstock.domain.exceptions import (
    DomainException,
    ProductNotFoundError,
    ValidationError,
)
from shopstock.domain.model.order import Order, OrderLineItem
from shopstock.domain.model.value_objects import Quantity
from shopstock.domain.repository.order_repository import OrderRepository
from shopstock.domain.repository.product_repository import ProductRepository
from shopstock.domain.service.reservation_engine import ReservationEngine

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        engine: ReservationEngine,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._engine = engine

    async def handle(self, user_id: int, item_specs: list[OrderItemSpec]) -> OrderDTO:
        line_items: list[OrderLineItem] = []
        for spec in item_specs:
            product = await self._product_repo.get_by_id(spec.product_id)
            if product is None:
                raise ProductNotFoundError(spec.product_id)
            if not product.active:
                raise ValidationError(f"Product '{product.title}' is not on sale")
            line_items.append(
                OrderLineItem(
                    product_id=product.id,
                    title=product.title,
                    quantity=Quantity(spec.quantity),
                    unit_price=product.price,  # <-- price snapshot
                )
            )

        order = Order.create(user_id=user_id, items=line_items)
        await self._order_repo.save(order)

        try:
            await self._engine.reserve_items(order.stock_items(), order.id)
        except DomainException as exc:
            logger.warning("Order #%s cancelled, stock not reserved: %s", order.id, exc)
            order.cancel()
            await self._order_repo.save(order)
            raise

        logger.info("Order #%s placed by user %s", order.id, user_id)
        return order_to_dto(order)
