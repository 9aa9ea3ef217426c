"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from shopstock.domain.repository.product_repository import ProductRepository
from shopstock.domain.service.reservation_engine import ReservationEngine


@dataclass(frozen=True)
class StockLineDTO:
    product_id: int
    title: str
    available: int
    reserved: int
    free: int
    active: bool


class ShowStockHandler:

    def __init__(self, product_repo: ProductRepository, engine: ReservationEngine) -> None:
        self._product_repo = product_repo
        self._engine = engine

    async def handle(self) -> list[StockLineDTO]:
        reserved = self._engine.qty_reserved_snapshot()
        products = await self._product_repo.list_all()
        return [
            StockLineDTO(
                product_id=p.id,
                title=p.title,
                available=p.qty_available,
                reserved=reserved.get(p.id, 0),
                free=p.qty_available - reserved.get(p.id, 0),
                active=p.active,
            )
            for p in sorted(products, key=lambda p: p.id)
        ]
