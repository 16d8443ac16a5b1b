"""Payment request: the root object handed to the transport layer."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from payment_request.domain.coded_enum import CodedEnum
from payment_request.domain.entities.order import Order
from payment_request.domain.exceptions import InvalidArgumentError
from payment_request.domain.validation import check_not_none
from payment_request.domain.value_objects.payer import Payer
from payment_request.domain.value_objects.recipient import Recipient

logger = logging.getLogger(__name__)


class PaymentScheme(CodedEnum):
    """Payment method a payer may use."""

    BANKCARDS = "BankCards"
    CASH = "Cash"
    SBERBANK = "Sberbank"
    WALLET = "Wallet"


def _check_instance(value: object, expected: type, name: str) -> None:
    if not isinstance(value, expected):
        raise InvalidArgumentError(
            f"{name} must be a {expected.__name__}, got {type(value).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment request composed of recipient, order, optional payer and schemes.

    schemes is the caller's preference ranking and keeps its order. An
    empty tuple asks the server to suggest every scheme available for
    the order.

    Payments compare by value but are not hashable, since the nested
    Order is not.
    """

    recipient: Recipient
    order: Order
    payer: Payer | None = None
    schemes: tuple[PaymentScheme, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _check_instance(check_not_none(self.recipient, "recipient"), Recipient, "recipient")
        _check_instance(check_not_none(self.order, "order"), Order, "order")
        if self.payer is not None:
            _check_instance(self.payer, Payer, "payer")

        check_not_none(self.schemes, "schemes")
        # A bare string is iterable but is never a sequence of schemes.
        if isinstance(self.schemes, (str, bytes)):
            raise InvalidArgumentError("schemes must be a sequence of PaymentScheme, got a string")

        schemes = tuple(self.schemes)
        for scheme in schemes:
            _check_instance(scheme, PaymentScheme, "scheme")
        object.__setattr__(self, "schemes", schemes)

    @classmethod
    def builder(cls) -> PaymentBuilder:
        return PaymentBuilder()


class PaymentBuilder:
    """Fluent staging area for a Payment.

    Not thread-safe; see OrderBuilder.
    """

    def __init__(self) -> None:
        self._recipient: Recipient | None = None
        self._order: Order | None = None
        self._payer: Payer | None = None
        self._schemes: Iterable[PaymentScheme] = ()

    def set_recipient(self, recipient: Recipient | None) -> PaymentBuilder:
        self._recipient = recipient
        return self

    def set_order(self, order: Order | None) -> PaymentBuilder:
        self._order = order
        return self

    def set_payer(self, payer: Payer | None) -> PaymentBuilder:
        self._payer = payer
        return self

    def set_schemes(self, schemes: Iterable[PaymentScheme]) -> PaymentBuilder:
        """Set desired schemes in order of preference.

        Items are checked on create().

        Raises:
            InvalidArgumentError: If schemes is None.
        """
        self._schemes = check_not_none(schemes, "schemes")
        return self

    def create(self) -> Payment:
        """Finalize the payment.

        Raises:
            InvalidArgumentError: If recipient or order was never set, or
                any field holds a value of the wrong type.
        """
        payment = Payment(
            recipient=check_not_none(self._recipient, "recipient"),
            order=check_not_none(self._order, "order"),
            payer=self._payer,
            schemes=self._schemes,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Payment created: recipient=%s payer=%s schemes=%s",
                payment.recipient.kind.value,
                payment.payer.kind.value if payment.payer is not None else None,
                [scheme.code for scheme in payment.schemes],
            )
        return payment
