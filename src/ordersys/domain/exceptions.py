"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument or invariant was violated (bad quantity, empty cart...)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """A requested quantity exceeds the product's current stock."""

    def __init__(self, product_id: str, requested: int, available: int, name: str | None = None) -> None:
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {name or product_id} "
            f"(need {requested}, have {available} available)"
        )
