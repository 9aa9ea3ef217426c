"""Application service: Set Stock use case (external stock update)."""

from __future__ import annotations

from shopstock.domain.exceptions import ProductNotFoundError
from shopstock.domain.repository.product_repository import ProductRepository


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, product_id: int, quantity: int) -> None:
        """Overwrite the authoritative quantity of a product."""
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        product.set_qty(quantity)
        await self._product_repo.update_qty(product_id, product.qty_available)
