"""Abstract repository for reservation rows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime

from shopstock.domain.model.reservation import Reservation


class ReservationRepository(ABC):

    @abstractmethod
    async def add_all(self, reservations: list[Reservation]) -> None:
        """Insert every reservation in a single store transaction."""

    @abstractmethod
    async def release(
        self, order_id: int, product_ids: Iterable[int]
    ) -> list[Reservation]:
        """Flag unreleased rows of ``order_id`` for each product as released.

        Runs as one transaction and returns the rows that were flipped
        (already-released rows are left alone and not returned).
        """

    @abstractmethod
    async def live_totals(self, now: datetime) -> dict[int, int]:
        """Sum of quantity per product over unreleased rows expiring after ``now``."""

    @abstractmethod
    async def list_by_order(self, order_id: int) -> list[Reservation]:
        """Every reservation row of an order, released or not."""
