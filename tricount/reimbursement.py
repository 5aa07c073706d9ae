"""Transfers that settle debts between users."""

from __future__ import annotations

from dataclasses import dataclass

from .user import User


@dataclass(frozen=True)
class Reimbursement:
    """``from_user`` owes ``amount`` to ``to_user``."""

    from_user: User
    to_user: User
    amount: float