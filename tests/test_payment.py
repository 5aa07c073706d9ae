import pytest

from tricount.payment import Payment
from tricount.user import User


@pytest.fixture
def alice():
    return User("Alice")


def test_new_payment_keeps_its_fields(alice):
    payment = Payment("Dinner", 30.0, "Dinner at restaurant", alice)
    assert payment.name == "Dinner"
    assert payment.price == 30.0
    assert payment.description == "Dinner at restaurant"
    assert payment.paid_by == alice


def test_new_payment_has_no_beneficiaries(alice):
    payment = Payment("Taxi", 20.0, "Taxi ride", alice)
    assert payment.beneficiaries == []


@pytest.mark.parametrize("price", [0.0, -1.0, -20.0])
def test_non_positive_price_is_rejected(alice, price):
    with pytest.raises(ValueError, match="Price < 0"):
        Payment("Taxi", price, "Taxi ride", alice)


def test_add_beneficiary_keeps_order(alice):
    bob = User("Bob")
    payment = Payment("Dinner", 30.0, "Dinner at restaurant", alice)
    payment.add_beneficiary(alice)
    payment.add_beneficiary(bob)
    assert payment.beneficiaries == [alice, bob]


def test_beneficiary_lists_are_not_shared(alice):
    first = Payment("Dinner", 30.0, "Dinner at restaurant", alice)
    second = Payment("Taxi", 20.0, "Taxi ride", alice)
    first.add_beneficiary(User("Bob"))
    assert second.beneficiaries == []