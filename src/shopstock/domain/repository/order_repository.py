"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection

from shopstock.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning ``order.id`` if unset."""

    @abstractmethod
    async def list_for_courier(
        self, courier_ids: Collection[int], limit: int = 100
    ) -> list[Order]:
        """Open orders assigned under any of ``courier_ids``, newest first."""
