"""Read-through catalog cache in front of a slower ProductRepository.

Reads are served from a snapshot of ``list_all()`` for up to ``ttl``
seconds.  Writes go straight to the wrapped repository and drop the
snapshot, so this process always sees its own stock changes.
Callers get copies; the snapshot itself is never handed out.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import replace

from shopstock.domain.model.product import Product
from shopstock.domain.repository.product_repository import ProductRepository


class CachedProductRepository(ProductRepository):

    def __init__(
        self,
        inner: ProductRepository,
        ttl: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._inner = inner
        self._ttl = ttl
        self._clock = clock
        self._snapshot: dict[int, Product] | None = None
        self._loaded_at = 0.0

    async def list_all(self) -> list[Product]:
        return [replace(p) for p in (await self._products()).values()]

    async def get_by_id(self, product_id: int) -> Product | None:
        product = (await self._products()).get(product_id)
        return replace(product) if product is not None else None

    async def save(self, product: Product) -> None:
        await self._inner.save(product)
        self.invalidate()

    async def update_qty(self, product_id: int, new_qty: int) -> None:
        await self._inner.update_qty(product_id, new_qty)
        self.invalidate()

    def invalidate(self) -> None:
        self._snapshot = None

    async def _products(self) -> dict[int, Product]:
        now = self._clock()
        if self._snapshot is None or now - self._loaded_at >= self._ttl:
            products = await self._inner.list_all()
            self._snapshot = {p.id: p for p in products}
            self._loaded_at = now
        return self._snapshot
