"""Order attributes defined by the shop, and the server-side order status.

The status vocabulary is informational: the server drives transitions and
this package only represents the value. A typical forward path is

    CREATED → APPROVED → PROCESSING → AUTHORIZED → DELIVERED

with REFUSED / CANCELED as early exits, CLEARED after AUTHORIZED for bank
cards, and REFUNDED reachable from AUTHORIZED or DELIVERED.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

from payment_request.domain.coded_enum import CodedEnum
from payment_request.domain.exceptions import InvalidArgumentError
from payment_request.domain.validation import check_not_none
from payment_request.domain.value_objects.currency import Currency

logger = logging.getLogger(__name__)


class OrderStatus(CodedEnum):
    """Order lifecycle status as reported by the server."""

    CREATED = "Created"
    APPROVED = "Approved"
    REFUSED = "Refused"
    PROCESSING = "Processing"
    AUTHORIZED = "Authorized"
    DELIVERED = "Delivered"
    CANCELED = "Canceled"
    CLEARED = "Cleared"
    REFUNDED = "Refunded"


def _empty_parameters() -> Mapping[str, str]:
    return MappingProxyType({})


def to_amount(amount: Decimal | int | float | str | None) -> Decimal | None:
    """Normalise an amount to a finite Decimal.

    Non-Decimal input goes through str() first so that 10.50 becomes
    Decimal("10.5") rather than its binary float expansion.

    Raises:
        InvalidArgumentError: If amount is not a number, or is NaN/Infinity.
    """
    if amount is None:
        return None

    if isinstance(amount, bool):
        raise InvalidArgumentError("amount must be a number, got bool")

    if not isinstance(amount, Decimal):
        try:
            amount = Decimal(str(amount))
        except InvalidOperation as e:
            raise InvalidArgumentError(f"amount must be a number, got {amount!r}") from e

    if not amount.is_finite():
        raise InvalidArgumentError(f"amount must be finite, got {amount}")
    return amount


@dataclass(frozen=True, slots=True)
class Order:
    """Shop-defined order attributes.

    All fields are optional. amount and currency belong together
    conceptually but are not checked as a pair; articles priced by the
    shop carry neither.

    parameters is always a read-only copy, so mutating the mapping handed
    in does not reach the Order. Orders compare by value but are not
    hashable: hash() raises TypeError.
    """

    client_order_id: str | None = None
    customer_id: str | None = None
    amount: Decimal | None = None
    currency: Currency | None = None
    parameters: Mapping[str, str] = field(default_factory=_empty_parameters)

    # parameters is a mapping, so no value-based hash exists.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        check_not_none(self.parameters, "parameters")
        if self.currency is not None and not isinstance(self.currency, Currency):
            raise InvalidArgumentError(
                f"currency must be a Currency, got {type(self.currency).__name__}"
            )

        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @classmethod
    def builder(cls) -> OrderBuilder:
        return OrderBuilder()


class OrderBuilder:
    """Fluent staging area for an Order.

    Not thread-safe: a builder belongs to the single caller populating it.
    The Order returned by create() is immutable and safe to share.
    """

    def __init__(self) -> None:
        self._client_order_id: str | None = None
        self._customer_id: str | None = None
        self._amount: Decimal | None = None
        self._currency: Currency | None = None
        self._parameters: Mapping[str, str] = {}

    def set_client_order_id(self, client_order_id: str | None) -> OrderBuilder:
        self._client_order_id = client_order_id
        return self

    def set_customer_id(self, customer_id: str | None) -> OrderBuilder:
        self._customer_id = customer_id
        return self

    def set_amount(self, amount: Decimal | int | float | str | None) -> OrderBuilder:
        """Set the amount, excluding commission.

        Raises:
            InvalidArgumentError: If amount is not a finite number.
        """
        self._amount = to_amount(amount)
        return self

    def set_currency(self, currency: Currency | None) -> OrderBuilder:
        self._currency = currency
        return self

    def set_parameters(self, parameters: Mapping[str, str]) -> OrderBuilder:
        """Set shop-defined parameters.

        The mapping is copied on create(), not here.

        Raises:
            InvalidArgumentError: If parameters is None.
        """
        self._parameters = check_not_none(parameters, "parameters")
        return self

    def create(self) -> Order:
        order = Order(
            client_order_id=self._client_order_id,
            customer_id=self._customer_id,
            amount=self._amount,
            currency=self._currency,
            parameters=self._parameters,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Order created: amount_set=%s currency=%s parameters=%d",
                order.amount is not None,
                order.currency,
                len(order.parameters),
            )
        return order
