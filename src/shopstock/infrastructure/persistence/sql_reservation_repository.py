"""SQLAlchemy-backed implementation of ReservationRepository.

Each write method is one transaction: a batch of inserts (or of
released-flag updates) either lands completely or not at all.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from sqlalchemy import func, select

from shopstock.domain.model.reservation import Reservation
from shopstock.domain.repository.reservation_repository import ReservationRepository
from shopstock.infrastructure.persistence.database import (
    Database,
    from_db_time,
    to_db_time,
)
from shopstock.infrastructure.persistence.tables import ReservationRow


class SqlReservationRepository(ReservationRepository):

    def __init__(self, database: Database) -> None:
        self._db = database

    async def add_all(self, reservations: list[Reservation]) -> None:
        rows = [self._to_row(r) for r in reservations]
        async with self._db.session() as session, session.begin():
            session.add_all(rows)
            await session.flush()
            for reservation, row in zip(reservations, rows):
                reservation.id = row.id

    async def release(
        self, order_id: int, product_ids: Iterable[int]
    ) -> list[Reservation]:
        released: list[Reservation] = []
        async with self._db.session() as session, session.begin():
            for product_id in product_ids:
                result = await session.execute(
                    select(ReservationRow).where(
                        ReservationRow.order_id == order_id,
                        ReservationRow.product_id == product_id,
                        ReservationRow.released.is_(False),
                    )
                )
                for row in result.scalars():
                    row.released = True
                    released.append(self._to_domain(row))
        return released

    async def live_totals(self, now: datetime) -> dict[int, int]:
        async with self._db.session() as session:
            result = await session.execute(
                select(ReservationRow.product_id, func.sum(ReservationRow.qty))
                .where(
                    ReservationRow.released.is_(False),
                    ReservationRow.expiry_timestamp > to_db_time(now),
                )
                .group_by(ReservationRow.product_id)
            )
            return {product_id: int(total or 0) for product_id, total in result.all()}

    async def list_by_order(self, order_id: int) -> list[Reservation]:
        async with self._db.session() as session:
            result = await session.execute(
                select(ReservationRow)
                .where(ReservationRow.order_id == order_id)
                .order_by(ReservationRow.id)
            )
            return [self._to_domain(row) for row in result.scalars()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(reservation: Reservation) -> ReservationRow:
        return ReservationRow(
            order_id=reservation.order_id,
            product_id=reservation.product_id,
            qty=reservation.qty,
            reserve_timestamp=to_db_time(reservation.reserved_at),
            expiry_timestamp=to_db_time(reservation.expires_at),
            released=reservation.released,
        )

    @staticmethod
    def _to_domain(row: ReservationRow) -> Reservation:
        return Reservation(
            id=row.id,
            order_id=row.order_id,
            product_id=row.product_id,
            qty=row.qty,
            reserved_at=from_db_time(row.reserve_timestamp),
            expires_at=from_db_time(row.expiry_timestamp),
            released=bool(row.released),
        )
