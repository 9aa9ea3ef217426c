"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in dicts and lists.  Every read yields to the event
loop once, like a real database round-trip, so interleavings between
concurrent coroutines actually happen in tests.
"""

from __future__ import annotations

import asyncio
from collections.abc import Collection, Iterable
from dataclasses import replace
from datetime import datetime

from shopstock.domain.exceptions import ProductNotFoundError
from shopstock.domain.model.courier import Courier
from shopstock.domain.model.order import OPEN_STATUSES, Order
from shopstock.domain.model.product import Product
from shopstock.domain.model.reservation import Reservation
from shopstock.domain.repository.courier_repository import CourierRepository
from shopstock.domain.repository.order_repository import OrderRepository
from shopstock.domain.repository.product_repository import ProductRepository
from shopstock.domain.repository.reservation_repository import ReservationRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.list_calls = 0

    async def list_all(self) -> list[Product]:
        self.list_calls += 1
        await asyncio.sleep(0)
        return [replace(p) for p in self._store.values()]

    async def get_by_id(self, product_id: int) -> Product | None:
        await asyncio.sleep(0)
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    async def save(self, product: Product) -> None:
        self._store[product.id] = replace(product)

    async def update_qty(self, product_id: int, new_qty: int) -> None:
        await asyncio.sleep(0)
        if product_id not in self._store:
            raise ProductNotFoundError(product_id)
        self._store[product_id].qty_available = new_qty

    def qty(self, product_id: int) -> int:
        return self._store[product_id].qty_available


class FakeReservationRepository(ReservationRepository):

    def __init__(self, rows: list[Reservation] | None = None) -> None:
        self.rows: list[Reservation] = list(rows or [])
        self.fail_next_insert = False

    async def add_all(self, reservations: list[Reservation]) -> None:
        await asyncio.sleep(0)
        if self.fail_next_insert:
            self.fail_next_insert = False
            raise RuntimeError("database is locked")
        for r in reservations:
            r.id = len(self.rows) + 1
            self.rows.append(replace(r))

    async def release(
        self, order_id: int, product_ids: Iterable[int]
    ) -> list[Reservation]:
        await asyncio.sleep(0)
        wanted = set(product_ids)
        released = []
        for row in self.rows:
            if row.order_id == order_id and row.product_id in wanted and row.release():
                released.append(replace(row))
        return released

    async def live_totals(self, now: datetime) -> dict[int, int]:
        await asyncio.sleep(0)
        totals: dict[int, int] = {}
        for row in self.rows:
            if row.is_live(now):
                totals[row.product_id] = totals.get(row.product_id, 0) + row.qty
        return totals

    async def list_by_order(self, order_id: int) -> list[Reservation]:
        return [replace(r) for r in self.rows if r.order_id == order_id]


def _copy(order: Order) -> Order:
    return replace(order, items=[replace(item) for item in order.items])


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    async def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return _copy(order) if order is not None else None

    async def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = _copy(order)

    async def list_for_courier(
        self, courier_ids: Collection[int], limit: int = 100
    ) -> list[Order]:
        orders = [
            o for o in self._store.values()
            if o.courier_id in courier_ids and o.status in OPEN_STATUSES
        ]
        orders.sort(key=lambda o: o.id, reverse=True)
        return orders[:limit]


class FakeCourierRepository(CourierRepository):

    def __init__(self, couriers: list[Courier] | None = None) -> None:
        self._store: dict[int, Courier] = {}
        for c in couriers or []:
            self._store[c.courier_id] = c

    async def find(self, any_id: int) -> Courier | None:
        for courier_id in sorted(self._store):
            courier = self._store[courier_id]
            if any_id in courier.ids:
                return replace(courier)
        return None

    async def save(self, courier: Courier) -> None:
        self._store[courier.courier_id] = replace(courier)

    async def list_active(self) -> list[Courier]:
        return [replace(self._store[k]) for k in sorted(self._store) if self._store[k].active]


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta) -> None:
        self.now = self.now + delta
