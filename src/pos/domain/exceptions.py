"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart with no lines."""

    def __init__(self) -> None:
        super().__init__("Cart is empty.")


class ExpiredProductError(ValidationError):
    """A product in the cart is past its expiry instant."""

    def __init__(self, product_name: str) -> None:
        super().__init__(f"{product_name} is expired.")
        self.product_name = product_name


class OutOfStockError(ValidationError):
    """A product no longer has enough stock for the cart at checkout."""

    def __init__(self, product_name: str) -> None:
        super().__init__(f"{product_name} is out of stock.")
        self.product_name = product_name


class InsufficientStockError(ValidationError):
    """More units were requested than a product has in stock."""

    def __init__(self, message: str = "Insufficient stock.") -> None:
        super().__init__(message)


class InsufficientBalanceError(ValidationError):
    """Raised by checkout (affordability) and by ``Customer.debit``."""

    def __init__(self, message: str = "Insufficient balance.") -> None:
        super().__init__(message)
