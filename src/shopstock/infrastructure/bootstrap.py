"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from shopstock.domain.repository.courier_repository import CourierRepository
from shopstock.domain.repository.order_repository import OrderRepository
from shopstock.domain.repository.product_repository import ProductRepository
from shopstock.domain.repository.reservation_repository import ReservationRepository
from shopstock.domain.service.reservation_engine import ReservationEngine
from shopstock.infrastructure.config import Settings, get_settings
from shopstock.infrastructure.persistence.cached_product_repository import (
    CachedProductRepository,
)
from shopstock.infrastructure.persistence.database import Database
from shopstock.infrastructure.persistence.sql_courier_repository import (
    SqlCourierRepository,
)
from shopstock.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from shopstock.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from shopstock.infrastructure.persistence.sql_reservation_repository import (
    SqlReservationRepository,
)


@dataclass
class Container:
    settings: Settings
    database: Database
    products: ProductRepository
    reservations: ReservationRepository
    orders: OrderRepository
    couriers: CourierRepository
    engine: ReservationEngine


@asynccontextmanager
async def open_container(settings: Settings | None = None) -> AsyncIterator[Container]:
    """Open the store, restore the reservation cache and yield the wiring.

    The engine is restored before the container is handed out, so every
    caller sees a cache consistent with the store.
    """
    settings = settings or get_settings()
    database = Database(settings.database_url, echo=settings.database_echo)
    try:
        await database.create_tables()

        products: ProductRepository = SqlProductRepository(database)
        if settings.catalog_cache_ttl_seconds > 0:
            products = CachedProductRepository(
                products, ttl=settings.catalog_cache_ttl_seconds
            )
        reservations = SqlReservationRepository(database)
        engine = ReservationEngine(products, reservations, ttl=settings.reservation_ttl)
        await engine.restore_reservations()

        yield Container(
            settings=settings,
            database=database,
            products=products,
            reservations=reservations,
            orders=SqlOrderRepository(database),
            couriers=SqlCourierRepository(database),
            engine=engine,
        )
    finally:
        await database.close()
