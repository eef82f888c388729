"""Customer entity: a named holder of a prepaid balance."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import InsufficientBalanceError, ValidationError
from pos.domain.model.value_objects import Money


@dataclass
class Customer:
    name: str
    balance: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")

    def can_afford(self, amount: Money) -> bool:
        return amount <= self.balance

    def debit(self, amount: Money) -> None:
        """Charge *amount* against the balance. No overdraft."""
        if not self.can_afford(amount):
            raise InsufficientBalanceError()
        self.balance = self.balance - amount
