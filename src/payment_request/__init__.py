"""payment-request: validated, immutable payloads for initiating a payment."""

import logging

from payment_request.domain.coded_enum import CodedEnum
from payment_request.domain.entities import (
    Order,
    OrderBuilder,
    OrderStatus,
    Payment,
    PaymentBuilder,
    PaymentScheme,
)
from payment_request.domain.exceptions import (
    DomainException,
    InvalidArgumentError,
    UnknownCodeError,
)
from payment_request.domain.value_objects import (
    EUR,
    RUB,
    USD,
    Currency,
    Payer,
    PayerKind,
    Recipient,
    RecipientKind,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EUR",
    "RUB",
    "USD",
    "CodedEnum",
    "Currency",
    "DomainException",
    "InvalidArgumentError",
    "Order",
    "OrderBuilder",
    "OrderStatus",
    "Payer",
    "PayerKind",
    "Payment",
    "PaymentBuilder",
    "PaymentScheme",
    "Recipient",
    "RecipientKind",
    "UnknownCodeError",
]
