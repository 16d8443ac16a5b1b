"""Domain exceptions for payment-request.

Exception hierarchy:
    DomainException (base)
    ├── InvalidArgumentError (construction-time validation, also a ValueError)
    └── UnknownCodeError (wire code decoding, also a LookupError)

All errors are raised synchronously by the factory or builder call that
detects them. Nothing in this package retries or recovers from them.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from transport errors raised
    by whatever layer submits the request.
    """


class InvalidArgumentError(DomainException, ValueError):
    """Raised when a value object or builder receives an invalid argument.

    Covers:
        - a required field that is None (e.g. Payment without recipient)
        - a required string that is empty (e.g. Payer.from_phone(""))
        - a field combination that matches none of the allowed shapes

    Retrying with the same input can never succeed; treat as a
    programming error at the call site.
    """


class UnknownCodeError(DomainException, LookupError):
    """Raised when a wire code matches no variant of a coded enumeration.

    Signals a vocabulary mismatch between client and server (e.g. the
    server introduced a new order status). Never silently defaulted.
    """

    def __init__(self, enum_name: str, code: object) -> None:
        super().__init__(f"Unknown {enum_name} code: {code!r}")
        self.enum_name = enum_name
        self.code = code
