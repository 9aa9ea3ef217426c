"""SQLAlchemy-backed implementation of CourierRepository."""

from __future__ import annotations

from sqlalchemy import or_, select

from shopstock.domain.model.courier import Courier
from shopstock.domain.repository.courier_repository import CourierRepository
from shopstock.infrastructure.persistence.database import Database
from shopstock.infrastructure.persistence.tables import CourierRow


class SqlCourierRepository(CourierRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    # --- CourierRepository interface ------------------------------------------

    async def find(self, any_id: int) -> Courier | None:
        async with self._db.session() as session:
            result = await session.execute(
                select(CourierRow)
                .where(or_(CourierRow.courier_id == any_id, CourierRow.tg_id == any_id))
                .order_by(CourierRow.courier_id)
                .limit(1)
            )
            row = result.scalars().first()
            return self._to_domain(row) if row is not None else None

    async def save(self, courier: Courier) -> None:
        async with self._db.session() as session, session.begin():
            await session.merge(
                CourierRow(
                    courier_id=courier.courier_id,
                    tg_id=courier.tg_id,
                    name=courier.name,
                    active=courier.active,
                )
            )

    async def list_active(self) -> list[Courier]:
        async with self._db.session() as session:
            result = await session.execute(
                select(CourierRow)
                .where(CourierRow.active.is_(True))
                .order_by(CourierRow.courier_id)
            )
            return [self._to_domain(row) for row in result.scalars()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: CourierRow) -> Courier:
        return Courier(
            courier_id=row.courier_id,
            tg_id=row.tg_id,
            name=row.name,
            active=bool(row.active),
        )
