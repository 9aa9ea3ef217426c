"""Courier roster entry.

A courier is known by two ids: the shop's own ``courier_id`` and the
chat account id ``tg_id`` they log in with.  Orders may have been
assigned under either one.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopstock.domain.exceptions import ValidationError


@dataclass
class Courier:
    courier_id: int
    tg_id: int
    name: str = "Courier"
    active: bool = True

    @staticmethod
    def create(courier_id: int, tg_id: int, name: str = "Courier") -> Courier:
        if courier_id <= 0 or tg_id <= 0:
            raise ValidationError("Courier ids must be positive")
        if not name.strip():
            raise ValidationError("Courier name is required")
        return Courier(courier_id=courier_id, tg_id=tg_id, name=name.strip())

    @property
    def ids(self) -> tuple[int, int]:
        """Every id an order of this courier can be filed under."""
        return (self.courier_id, self.tg_id)

    def deactivate(self) -> None:
        self.active = False

    def activate(self) -> None:
        self.active = True
