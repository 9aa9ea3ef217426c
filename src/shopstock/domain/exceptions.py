"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer (and the chat bot flows) can catch them uniformly and tell
the courier or customer that their action did not go through.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found: #{product_id}")
        self.product_id = product_id


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds what is available minus live reservations."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product #{product_id} "
            f"(need {requested}, have {available} available)"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class NegativeStockError(ValidationError):
    """A final deduction would drive ``qty_available`` below zero."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Negative stock for product #{product_id} "
            f"(deducting {requested} from {available})"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class CourierNotFoundError(EntityNotFoundError):

    def __init__(self, courier_id: int) -> None:
        super().__init__(f"Courier not found: #{courier_id}")
        self.courier_id = courier_id
