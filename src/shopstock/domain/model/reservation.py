"""Reservation records and the item shape shared by every stock operation.

A reservation is a temporary hold on product quantity, optionally tied to
an order, with an expiry after which it no longer counts against
availability.  Rows are soft-released, never deleted.

Lifecycle of a single row::

    created (unreleased, unexpired) --release()--> released   (terminal)
                                    --time------> expired    (terminal)

Expiry is never swept; expired rows are simply excluded by ``is_live``
and by the live-totals query in the repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shopstock.domain.model.value_objects import Quantity

# order_id stored for holds that are not yet attached to an order
NO_ORDER = 0


@dataclass(frozen=True)
class StockItem:
    """A ``{product_id, qty}`` pair passed to reserve, release and deduct."""

    product_id: int
    qty: int

    def __post_init__(self) -> None:
        Quantity(self.qty)


@dataclass
class Reservation:
    order_id: int
    product_id: int
    qty: int
    reserved_at: datetime
    expires_at: datetime
    released: bool = False
    id: int | None = None

    def is_live(self, now: datetime) -> bool:
        """True while the hold still counts against the product's stock."""
        return not self.released and self.expires_at > now

    def release(self) -> bool:
        """Flip ``released`` to True.  Returns False if it was already set."""
        if self.released:
            return False
        self.released = True
        return True
