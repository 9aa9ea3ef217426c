"""SQLAlchemy-backed implementation of OrderRepository.

Line items are kept as a JSON array in ``orders.items_json``; they are a
price snapshot and never queried on their own.
"""

from __future__ import annotations

import json
from collections.abc import Collection
from decimal import Decimal

from sqlalchemy import select

from shopstock.domain.model.order import OPEN_STATUSES, Order, OrderLineItem, OrderStatus
from shopstock.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from shopstock.domain.repository.order_repository import OrderRepository
from shopstock.infrastructure.persistence.database import (
    Database,
    from_db_time,
    to_db_time,
)
from shopstock.infrastructure.persistence.tables import OrderRow


class SqlOrderRepository(OrderRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- OrderRepository interface --------------------------------------------

    async def get_by_id(self, order_id: int) -> Order | None:
        async with self._db.session() as session:
            row = await session.get(OrderRow, order_id)
            return self._to_domain(row) if row is not None else None

    async def save(self, order: Order) -> None:
        async with self._db.session() as session, session.begin():
            if order.id is None:
                row = OrderRow()
                self._copy_to_row(order, row)
                session.add(row)
                await session.flush()
                order.id = row.order_id
            else:
                row = await session.get(OrderRow, order.id)
                if row is None:
                    row = OrderRow(order_id=order.id)
                    session.add(row)
                self._copy_to_row(order, row)

    async def list_for_courier(
        self, courier_ids: Collection[int], limit: int = 100
    ) -> list[Order]:
        async with self._db.session() as session:
            result = await session.execute(
                select(OrderRow)
                .where(
                    OrderRow.courier_id.in_(list(courier_ids)),
                    OrderRow.status.in_([s.value for s in OPEN_STATUSES]),
                )
                .order_by(OrderRow.order_id.desc())
                .limit(limit)
            )
            return [self._to_domain(row) for row in result.scalars()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _copy_to_row(order: Order, row: OrderRow) -> None:
        row.user_id = order.user_id
        row.status = order.status.value
        row.courier_id = order.courier_id
        row.created_at = to_db_time(order.created_at)
        row.delivered_at = to_db_time(order.delivered_at) if order.delivered_at else None
        row.items_json = json.dumps(
            [
                {
                    "product_id": item.product_id,
                    "title": item.title,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "deducted": item.deducted,
                }
                for item in order.items
            ]
        )

    @staticmethod
    def _to_domain(row: OrderRow) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                title=i["title"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(
                    Decimal(i["unit_price"]), i.get("currency", DEFAULT_CURRENCY)
                ),
                deducted=i.get("deducted", False),
            )
            for i in json.loads(row.items_json or "[]")
        ]
        return Order(
            id=row.order_id,
            user_id=row.user_id,
            items=items,
            status=OrderStatus(row.status),
            courier_id=row.courier_id,
            created_at=from_db_time(row.created_at),
            delivered_at=from_db_time(row.delivered_at),
        )
