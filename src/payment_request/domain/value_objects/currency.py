from __future__ import annotations

from dataclasses import dataclass

from payment_request.domain.exceptions import InvalidArgumentError, UnknownCodeError


@dataclass(frozen=True, slots=True)
class Currency:
    """ISO 4217 currency: alphabetic code plus numeric code.

    Only identity is modelled here; there is no arithmetic or formatting.
    """

    alpha_code: str
    numeric_code: int

    def __post_init__(self) -> None:
        if not (
            isinstance(self.alpha_code, str)
            and len(self.alpha_code) == 3
            and self.alpha_code.isascii()
            and self.alpha_code.isalpha()
            and self.alpha_code.isupper()
        ):
            raise InvalidArgumentError(
                f"alpha_code must be three upper-case letters, got {self.alpha_code!r}"
            )

        if (
            isinstance(self.numeric_code, bool)
            or not isinstance(self.numeric_code, int)
            or not 0 < self.numeric_code < 1000
        ):
            raise InvalidArgumentError(
                f"numeric_code must be an integer in 1..999, got {self.numeric_code!r}"
            )

    @classmethod
    def from_alpha_code(cls, alpha_code: str) -> Currency:
        """Look up one of the KNOWN_CURRENCIES by alphabetic code.

        Raises:
            UnknownCodeError: If the code is not in KNOWN_CURRENCIES.
        """
        try:
            return KNOWN_CURRENCIES[alpha_code]
        except (KeyError, TypeError) as e:
            raise UnknownCodeError(cls.__name__, alpha_code) from e

    def __str__(self) -> str:
        return self.alpha_code


RUB = Currency(alpha_code="RUB", numeric_code=643)
USD = Currency(alpha_code="USD", numeric_code=840)
EUR = Currency(alpha_code="EUR", numeric_code=978)

KNOWN_CURRENCIES: dict[str, Currency] = {c.alpha_code: c for c in (RUB, USD, EUR)}
