"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select, update

from shopstock.domain.exceptions import ProductNotFoundError
from shopstock.domain.model.product import Product
from shopstock.domain.model.value_objects import Money
from shopstock.domain.repository.product_repository import ProductRepository
from shopstock.infrastructure.persistence.database import Database
from shopstock.infrastructure.persistence.tables import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- ProductRepository interface ------------------------------------------

    async def list_all(self) -> list[Product]:
        async with self._db.session() as session:
            result = await session.execute(
                select(ProductRow).order_by(ProductRow.product_id)
            )
            return [self._to_domain(row) for row in result.scalars()]

    async def get_by_id(self, product_id: int) -> Product | None:
        async with self._db.session() as session:
            row = await session.get(ProductRow, product_id)
            return self._to_domain(row) if row is not None else None

    async def save(self, product: Product) -> None:
        async with self._db.session() as session, session.begin():
            await session.merge(self._to_row(product))

    async def update_qty(self, product_id: int, new_qty: int) -> None:
        async with self._db.session() as session, session.begin():
            result = await session.execute(
                update(ProductRow)
                .where(ProductRow.product_id == product_id)
                .values(qty_available=new_qty)
            )
            if result.rowcount == 0:
                raise ProductNotFoundError(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> ProductRow:
        return ProductRow(
            product_id=product.id,
            title=product.title,
            price=product.price.amount,
            category=product.category,
            qty_available=product.qty_available,
            active=product.active,
        )

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.product_id,
            title=row.title,
            price=Money(Decimal(str(row.price)).quantize(Decimal("0.01"))),
            category=row.category,
            qty_available=row.qty_available,
            active=bool(row.active),
        )
