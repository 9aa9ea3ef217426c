"""Application service: Add Product use case."""

from __future__ import annotations

from shopstock.domain.exceptions import ValidationError
from shopstock.domain.model.product import Product
from shopstock.domain.model.value_objects import Money
from shopstock.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self,
        title: str,
        price: str,
        category: str = "general",
        qty_available: int = 0,
    ) -> Product:
        """Add a new product to the catalog."""
        if not title or not title.strip():
            raise ValidationError("Product title is required")

        all_products = await self._product_repo.list_all()
        if any(p.title.lower() == title.strip().lower() for p in all_products):
            raise ValidationError(f"Product '{title}' already exists")

        # Auto-assign ID based on existing products
        next_id = max((p.id for p in all_products), default=0) + 1

        product = Product(
            id=next_id,
            title=title.strip(),
            price=Money.of(price),
            category=category,
        )
        product.set_qty(qty_available)
        await self._product_repo.save(product)
        return product
