"""Order aggregate — a customer's delivery order and its courier lifecycle.

The Order owns its line items.  Stock itself is never touched here: the
application handlers coordinate the reservation engine around each
state transition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shopstock.domain.exceptions import ValidationError
from shopstock.domain.model.reservation import StockItem
from shopstock.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    COURIER_ASSIGNED = "courier_assigned"
    DELIVERED = "delivered"
    NOT_ISSUED = "not_issued"
    CANCELLED = "cancelled"


# Orders a courier still has to hand over.
OPEN_STATUSES = (OrderStatus.PENDING, OrderStatus.COURIER_ASSIGNED)


@dataclass
class OrderLineItem:
    """Price snapshot of a product at the moment the order was placed."""

    product_id: int
    title: str
    quantity: Quantity
    unit_price: Money
    # Set once the line's stock has been deducted on delivery
    deducted: bool = False

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


MAX_LINE_ITEMS = 50


@dataclass
class Order:
    """Aggregate root for delivery orders.

    Use ``Order.create()`` for new orders.  ``__init__`` stays simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    user_id: int
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    courier_id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    delivered_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(user_id: int, items: list[OrderLineItem]) -> Order:
        if user_id <= 0:
            raise ValidationError("A valid customer id is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")
        return Order(id=None, user_id=user_id, items=list(items))

    # --- State transitions ----------------------------------------------------

    def assign_courier(self, courier_id: int) -> None:
        self._assert_open("assign a courier to")
        self.courier_id = courier_id
        self.status = OrderStatus.COURIER_ASSIGNED

    def mark_delivered(self, courier_id: int, now: datetime | None = None) -> None:
        """The courier handed the order over.

        Every line must already be deducted (coordinated by the application
        handler).
        """
        self.check_deliverable(courier_id)
        if self.pending_lines():
            raise ValidationError(
                f"Order #{self.id} still has stock to deduct"
            )
        self.courier_id = courier_id
        self.status = OrderStatus.DELIVERED
        self.delivered_at = now or datetime.now(timezone.utc)

    def check_deliverable(self, courier_id: int) -> None:
        """Raise unless ``courier_id`` may deliver this order.  Changes nothing."""
        self._assert_open("deliver")
        if self.courier_id is not None and self.courier_id != courier_id:
            raise ValidationError(
                f"Order #{self.id} is assigned to another courier"
            )

    def mark_not_issued(self) -> None:
        self._assert_open("mark as not issued")
        self._assert_nothing_deducted("mark as not issued")
        self.status = OrderStatus.NOT_ISSUED

    def cancel(self) -> None:
        self._assert_open("cancel")
        self._assert_nothing_deducted("cancel")
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    def stock_items(self) -> list[StockItem]:
        return [StockItem(item.product_id, item.quantity.value) for item in self.items]

    def pending_lines(self) -> list[OrderLineItem]:
        """Lines whose stock has not been deducted yet."""
        return [item for item in self.items if not item.deducted]

    # --- Internal helpers -----------------------------------------------------

    def _assert_open(self, action: str) -> None:
        if not self.is_open:
            raise ValidationError(
                f"Cannot {action} order #{self.id} — current status is "
                f"{self.status.value}"
            )

    def _assert_nothing_deducted(self, action: str) -> None:
        if any(item.deducted for item in self.items):
            raise ValidationError(
                f"Cannot {action} order #{self.id}: it is partly delivered, "
                f"finish the delivery instead"
            )
