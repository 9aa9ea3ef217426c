"""Product aggregate.

Products carry the authoritative ``qty_available`` for the shop. Creating
a reservation never touches it; only a final deduction or an explicit
stock update does.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopstock.domain.exceptions import ValidationError
from shopstock.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: int
    title: str
    price: Money
    category: str = "general"
    qty_available: int = 0
    active: bool = True

    def set_qty(self, new_qty: int) -> None:
        """Overwrite the authoritative stock count (e.g. after a recount)."""
        if new_qty < 0:
            raise ValidationError(
                f"Stock for '{self.title}' cannot be negative, got {new_qty}"
            )
        self.qty_available = new_qty
