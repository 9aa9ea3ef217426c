"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (SQL, cached, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopstock.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return the current catalog with authoritative quantities."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    async def update_qty(self, product_id: int, new_qty: int) -> None:
        """Set the authoritative quantity.

        Raises ProductNotFoundError if the product does not exist.
        """
