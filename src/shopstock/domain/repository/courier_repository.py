"""Abstract repository for the courier roster."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopstock.domain.model.courier import Courier


class CourierRepository(ABC):

    @abstractmethod
    async def find(self, any_id: int) -> Courier | None:
        """Return the courier whose ``courier_id`` or ``tg_id`` equals ``any_id``."""

    @abstractmethod
    async def save(self, courier: Courier) -> None:
        """Insert or update a courier, keyed by ``courier_id``."""

    @abstractmethod
    async def list_active(self) -> list[Courier]:
        """Active couriers ordered by ``courier_id``."""
