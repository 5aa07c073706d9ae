# tricount

A small library for keeping track of shared expenses within a group.
It records who paid for what and for whom. From that it works out how much
each member owes the others, and it produces a list of reimbursements that
settles everyone's balance.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from tricount.user import User
from tricount.payment import Payment
from tricount.group import Group

alice, bob, charlie = User("Alice"), User("Bob"), User("Charlie")

dinner = Payment("Dinner", 30.0, "Dinner at restaurant", alice)
dinner.add_beneficiary(alice)
dinner.add_beneficiary(bob)

taxi = Payment("Taxi", 20.0, "Taxi ride", bob)
taxi.add_beneficiary(bob)
taxi.add_beneficiary(charlie)

group = Group()
for user in (alice, bob, charlie):
    group.add_user(user)
group.add_payment(dinner)
group.add_payment(taxi)

group.compute_balances_for_user(bob)
# {'Alice': 15.0, 'Charlie': -10.0}

group.compute_debt_for_user(alice)
# -15.0

group.compute_all_reimbursements()
# [Reimbursement(from_user=User(name='Charlie'), to_user=User(name='Alice'), amount=10.0),
#  Reimbursement(from_user=User(name='Bob'), to_user=User(name='Alice'), amount=5.0)]
```

## Concepts

- `tricount.user.User`: a member of the group, identified by `name`. It is
  immutable and hashable. Its string form is its name.
- `tricount.payment.Payment`: an expense with a `name`, a `price`, a
  `description`, the user who paid (`paid_by`) and the users it was paid for
  (`beneficiaries`, added with `add_beneficiary(user)`). The price must be
  positive, or `ValueError` is raised. The price is split evenly among the
  beneficiaries.
- `tricount.reimbursement.Reimbursement`: an immutable record saying that
  `from_user` owes `amount` to `to_user`.
- `tricount.group.Group`: holds the `users` and the `payments`, added with
  `add_user(user)` and `add_payment(payment)`.
  - `compute_balances_for_user(user)` returns a dict from every other
    member's name to an amount. A positive value means the user owes that
    member money. A negative value means that member owes the user. Payments
    with no beneficiaries are ignored. Members are matched by name.
  - `compute_debt_for_user(user)` returns the sum of those balances. A
    positive result means the user owes the group. A negative result means
    the group owes the user.
  - `compute_all_reimbursements()` pairs debtors with creditors and returns a
    list of `Reimbursement` records. Each one transfers the smaller of the
    two outstanding amounts, and together they settle all debts.

## What it does not do

This is a library only. It has no command-line tool and no user interface.
It does not save groups or payments anywhere, and it does not convert them to
or from files. Amounts are plain floats, with no currency handling and no
rounding.