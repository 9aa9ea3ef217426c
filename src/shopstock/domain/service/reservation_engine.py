"""Domain service: Reservation Engine.

Guards the shop against overselling.  Availability of a product is its
authoritative ``qty_available`` minus the quantity held by live
reservations.  The engine keeps that held quantity per product in an
in-memory cache derived from the reservation table:

- ``restore_reservations`` rebuilds the cache from the store at boot;
- ``reserve_items`` / ``release_reservation`` keep it in step afterwards;
- ``final_deduction`` permanently lowers ``qty_available`` once an order
  is handed over, one product at a time under a per-product lock.

The store is the single source of truth.  The cache lives as long as the
engine instance and can always be rebuilt from the store.

Expired reservations are never swept.  They drop out of the cache the
next time it is restored, and out of the store's live totals immediately.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone

from shopstock.domain.exceptions import (
    InsufficientStockError,
    NegativeStockError,
    ProductNotFoundError,
)
from shopstock.domain.model.reservation import NO_ORDER, Reservation, StockItem
from shopstock.domain.repository.product_repository import ProductRepository
from shopstock.domain.repository.reservation_repository import ReservationRepository
from shopstock.domain.service.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)

DEFAULT_RESERVATION_TTL = timedelta(minutes=15)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReservationEngine:

    def __init__(
        self,
        product_repo: ProductRepository,
        reservation_repo: ReservationRepository,
        ttl: timedelta = DEFAULT_RESERVATION_TTL,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("Reservation TTL must be positive")
        self._product_repo = product_repo
        self._reservation_repo = reservation_repo
        self._ttl = ttl
        self._clock = clock
        self._qty_reserved: dict[int, int] = {}
        # Rows expiring at or before this instant are not in the cache.
        self._counted_since = clock()
        self._deduct_locks = KeyedLock()
        self._reserve_lock = asyncio.Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    # --- Recovery -------------------------------------------------------------

    async def restore_reservations(self) -> None:
        """Replace the cache with the store's live reservation totals.

        Call once at process start, before serving requests.
        """
        now = self._clock()
        totals = await self._reservation_repo.live_totals(now)
        self._qty_reserved = {pid: qty for pid, qty in totals.items() if qty > 0}
        self._counted_since = now
        logger.info("Reservations restored for %d products", len(self._qty_reserved))

    # --- Queries --------------------------------------------------------------

    def reserved(self, product_id: int) -> int:
        return self._qty_reserved.get(product_id, 0)

    def qty_reserved_snapshot(self) -> dict[int, int]:
        """Read-only copy of the reserved quantity per product."""
        return dict(self._qty_reserved)

    async def validate_stock(self, product_id: int, qty: int) -> bool:
        """Advisory availability check.  Never raises; unknown products are False.

        Does not reserve anything: a caller that goes on to reserve must
        still handle ``InsufficientStockError``.
        """
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            return False
        return product.qty_available - self.reserved(product_id) >= qty

    # --- Reservations ---------------------------------------------------------

    async def reserve_items(
        self, items: Iterable[StockItem], order_id: int | None = None
    ) -> None:
        """Hold stock for every item, or for none of them.

        All items are validated before anything is written.  Validation and
        the insert run under one lock so that two concurrent reservations
        cannot both claim the same free units.
        """
        items = list(items)
        if not items:
            return
        async with self._reserve_lock:
            products = {p.id: p for p in await self._product_repo.list_all()}

            requested: dict[int, int] = {}
            for item in items:
                requested[item.product_id] = requested.get(item.product_id, 0) + item.qty
            for product_id, qty in requested.items():
                product = products.get(product_id)
                if product is None:
                    raise ProductNotFoundError(product_id)
                available = product.qty_available - self.reserved(product_id)
                if available < qty:
                    raise InsufficientStockError(product_id, qty, available)

            now = self._clock()
            expires_at = now + self._ttl
            rows = [
                Reservation(
                    order_id=order_id or NO_ORDER,
                    product_id=item.product_id,
                    qty=item.qty,
                    reserved_at=now,
                    expires_at=expires_at,
                )
                for item in items
            ]
            await self._reservation_repo.add_all(rows)

            for product_id, qty in requested.items():
                self._qty_reserved[product_id] = self.reserved(product_id) + qty

        logger.info(
            "Reserved %s for order #%s until %s",
            requested, order_id or NO_ORDER, expires_at.isoformat(),
        )

    async def release_reservation(
        self, items: Iterable[StockItem], order_id: int | None = None
    ) -> None:
        """Release the order's unreleased holds on the given products.

        Releasing something already released (or never reserved) is a no-op.
        The cache shrinks by what was actually released, never below zero.
        """
        product_ids = list(dict.fromkeys(item.product_id for item in items))
        if not product_ids:
            return
        released = await self._reservation_repo.release(order_id or NO_ORDER, product_ids)

        freed: dict[int, int] = {}
        for row in released:
            if row.expires_at > self._counted_since:
                freed[row.product_id] = freed.get(row.product_id, 0) + row.qty
        for product_id, qty in freed.items():
            remaining = max(0, self.reserved(product_id) - qty)
            if remaining:
                self._qty_reserved[product_id] = remaining
            else:
                self._qty_reserved.pop(product_id, None)

        if released:
            logger.info("Released %s for order #%s", freed, order_id or NO_ORDER)

    # --- Final deduction ------------------------------------------------------

    async def final_deduction(self, items: Iterable[StockItem]) -> None:
        """Permanently take each item's quantity out of stock.

        Deductions on the same product are serialized; different products
        proceed independently.  The batch is not transactional: if an item
        fails, items deducted before it stay deducted.
        """
        for item in items:
            async with self._deduct_locks.hold(item.product_id):
                product = await self._product_repo.get_by_id(item.product_id)
                if product is None:
                    raise ProductNotFoundError(item.product_id)
                new_qty = product.qty_available - item.qty
                if new_qty < 0:
                    raise NegativeStockError(
                        item.product_id, item.qty, product.qty_available
                    )
                await self._product_repo.update_qty(item.product_id, new_qty)
            logger.info(
                "Final deduction: product #%d now has %d", item.product_id, new_qty
            )
