"""Shared-expense bookkeeping: users, payments, balances and reimbursements within a group."""

__version__ = "0.1.0"
__all__ = ["group", "payment", "reimbursement", "user"]