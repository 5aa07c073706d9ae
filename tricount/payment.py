"""Expenses paid by one user on behalf of others."""

from __future__ import annotations

from dataclasses import dataclass, field

from .user import User


@dataclass
class Payment:
    """An expense of ``price`` paid by ``paid_by`` and shared by its beneficiaries."""

    name: str
    price: float
    description: str
    paid_by: User
    beneficiaries: list[User] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.price > 0:
            raise ValueError("Price < 0")

    def add_beneficiary(self, user: User) -> None:
        """Add a user who shares the cost of this payment."""
        self.beneficiaries.append(user)