"""Shared pytest fixtures for the test suite."""

from decimal import Decimal

import pytest

from payment_request.domain.entities import Order
from payment_request.domain.value_objects import RUB, Payer, Recipient


@pytest.fixture
def shop_recipient() -> Recipient:
    """A recipient identified by shop only."""
    return Recipient.from_shop(12345)


@pytest.fixture
def phone_payer() -> Payer:
    """A payer identified by phone number."""
    return Payer.from_phone("+70000000000")


@pytest.fixture
def rub_order() -> Order:
    """An order for 10.50 RUB with no parameters."""
    return Order.builder().set_amount(Decimal("10.50")).set_currency(RUB).create()
