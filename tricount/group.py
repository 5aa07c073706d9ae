"""A group of users sharing payments, and the settling of their debts."""

from __future__ import annotations

from dataclasses import dataclass, field

from .payment import Payment
from .reimbursement import Reimbursement
from .user import User


@dataclass
class Group:
    """Users and the payments made among them."""

    users: list[User] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)

    def add_user(self, user: User) -> None:
        self.users.append(user)

    def add_payment(self, payment: Payment) -> None:
        self.payments.append(payment)

    def compute_balances_for_user(self, user: User) -> dict[str, float]:
        """Return, for every other member, what ``user`` owes them.

        A positive value means ``user`` owes that member money; a negative
        value means that member owes ``user``.
        """
        balances = {other.name: 0.0 for other in self.users if other.name != user.name}

        for payment in self.payments:
            beneficiaries = payment.beneficiaries
            if not beneficiaries:
                continue
            share = payment.price / len(beneficiaries)
            payer = payment.paid_by.name
            user_benefits = any(b.name == user.name for b in beneficiaries)

            if user_benefits:
                for beneficiary in beneficiaries:
                    if beneficiary.name != user.name and payer == user.name:
                        if beneficiary.name in balances:
                            balances[beneficiary.name] -= share
                    if beneficiary.name == user.name and payer != user.name:
                        if payer in balances:
                            balances[payer] += share
            elif payer == user.name:
                for beneficiary in beneficiaries:
                    if beneficiary.name in balances:
                        balances[beneficiary.name] -= share

        return balances

    def compute_debt_for_user(self, user: User) -> float:
        """Return the net amount ``user`` owes the group (negative: is owed)."""
        return sum(self.compute_balances_for_user(user).values(), 0.0)

    def compute_all_reimbursements(self) -> list[Reimbursement]:
        """Return transfers from debtors to creditors that settle all debts."""
        balances = {user: self.compute_debt_for_user(user) for user in self.users}

        debtors = [(user, amount) for user, amount in balances.items() if amount > 0.0]
        creditors = [(user, -amount) for user, amount in balances.items() if amount < 0.0]

        reimbursements: list[Reimbursement] = []
        while debtors and creditors:
            debtor, debt = debtors.pop()
            creditor, credit = creditors.pop()
            paid = min(debt, credit)
            reimbursements.append(Reimbursement(debtor, creditor, paid))

            debt -= paid
            credit -= paid
            if debt > 0.0:
                debtors.append((debtor, debt))
            if credit > 0.0:
                creditors.append((creditor, credit))

        return reimbursements