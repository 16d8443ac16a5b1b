from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from payment_request.domain.exceptions import InvalidArgumentError
from payment_request.domain.validation import check_not_empty


class PayerKind(Enum):
    """How a payer is identified."""

    PHONE = "phone"
    ACCOUNT_NUMBER = "account_number"


@dataclass(frozen=True, slots=True)
class Payer:
    """Who pays: identified by phone number or by wallet account number.

    Exactly one of the two fields is set and non-empty. Use the
    from_phone() / from_account_number() factories; direct construction
    is validated the same way.
    """

    phone: str | None = None
    account_number: str | None = None

    def __post_init__(self) -> None:
        if (self.phone is None) == (self.account_number is None):
            raise InvalidArgumentError(
                "Payer requires exactly one of phone or account_number"
            )

        if self.phone is not None:
            check_not_empty(self.phone, "phone")
        else:
            check_not_empty(self.account_number, "account_number")

    @classmethod
    def from_phone(cls, phone: str) -> Payer:
        """Payer identified by phone number.

        Raises:
            InvalidArgumentError: If phone is None or empty.
        """
        return cls(phone=check_not_empty(phone, "phone"))

    @classmethod
    def from_account_number(cls, account_number: str) -> Payer:
        """Payer identified by wallet account number.

        Raises:
            InvalidArgumentError: If account_number is None or empty.
        """
        return cls(account_number=check_not_empty(account_number, "account_number"))

    @property
    def kind(self) -> PayerKind:
        if self.phone is not None:
            return PayerKind.PHONE
        return PayerKind.ACCOUNT_NUMBER
