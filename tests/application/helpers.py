"""Shared wiring for application tests: handlers over in-memory fakes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from shopstock.application.dto import OrderItemSpec
from shopstock.application.place_order import PlaceOrderHandler
from shopstock.domain.model.courier import Courier
from shopstock.domain.model.product import Product
from shopstock.domain.model.value_objects import Money
from shopstock.domain.service.reservation_engine import ReservationEngine
from tests.fakes import (
    FakeClock,
    FakeCourierRepository,
    FakeOrderRepository,
    FakeProductRepository,
    FakeReservationRepository,
)


@dataclass
class Shop:
    orders: FakeOrderRepository
    products: FakeProductRepository
    reservations: FakeReservationRepository
    couriers: FakeCourierRepository
    engine: ReservationEngine
    clock: FakeClock

    async def place(self, user_id: int, *items: tuple[int, int]) -> int:
        handler = PlaceOrderHandler(self.orders, self.products, self.engine)
        dto = await handler.handle(user_id, [OrderItemSpec(pid, qty) for pid, qty in items])
        return dto.id


def make_shop(products: list[Product] | None = None) -> Shop:
    if products is None:
        products = [
            Product(id=1, title="Mango Ice", price=Money.of("450.00"), qty_available=10),
            Product(id=2, title="Pod Kit", price=Money.of("1900.00"), qty_available=3),
            Product(id=3, title="Retired", price=Money.of("100.00"), qty_available=5, active=False),
        ]
    product_repo = FakeProductRepository(products)
    reservation_repo = FakeReservationRepository()
    clock = FakeClock(datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc))
    engine = ReservationEngine(
        product_repo, reservation_repo, ttl=timedelta(minutes=15), clock=clock
    )
    return Shop(
        orders=FakeOrderRepository(),
        products=product_repo,
        reservations=reservation_repo,
        couriers=FakeCourierRepository(
            [
                Courier(courier_id=7, tg_id=7007, name="Artem"),
                Courier(courier_id=8, tg_id=8008, name="Oleg"),
                Courier(courier_id=9, tg_id=9009, name="Retired", active=False),
            ]
        ),
        engine=engine,
        clock=clock,
    )
