"""SQLAlchemy table mappings for products, reservations, orders and couriers."""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, Numeric, String, Text

from shopstock.infrastructure.persistence.database import Base


class ProductRow(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(200), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(50), nullable=False, default="general")
    qty_available = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)


class ReservationRow(Base):
    """One hold on stock.  ``released`` only ever goes from False to True."""

    __tablename__ = "reservations"
    __table_args__ = (
        Index("ix_reservations_order_product", "order_id", "product_id"),
        Index("ix_reservations_live", "released", "expiry_timestamp"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, nullable=False, default=0)
    product_id = Column(Integer, nullable=False)
    qty = Column(Integer, nullable=False)
    reserve_timestamp = Column(DateTime, nullable=False)
    expiry_timestamp = Column(DateTime, nullable=False)
    released = Column(Boolean, nullable=False, default=False)


class OrderRow(Base):
    __tablename__ = "orders"
    __table_args__ = (Index("ix_orders_courier_status", "courier_id", "status"),)

    order_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False)
    status = Column(String(32), nullable=False)
    courier_id = Column(Integer, nullable=True)
    items_json = Column(Text, nullable=False, default="[]")
    created_at = Column(DateTime, nullable=False)
    delivered_at = Column(DateTime, nullable=True)


class CourierRow(Base):
    __tablename__ = "couriers"

    courier_id = Column(Integer, primary_key=True, autoincrement=False)
    tg_id = Column(Integer, nullable=False, unique=True)
    name = Column(String(100), nullable=False, default="Courier")
    active = Column(Boolean, nullable=False, default=True)
