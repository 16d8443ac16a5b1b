"""Value objects - Immutable objects defined by their attributes."""

from payment_request.domain.value_objects.currency import EUR, KNOWN_CURRENCIES, RUB, USD, Currency
from payment_request.domain.value_objects.payer import Payer, PayerKind
from payment_request.domain.value_objects.recipient import Recipient, RecipientKind

__all__ = [
    "EUR",
    "KNOWN_CURRENCIES",
    "RUB",
    "USD",
    "Currency",
    "Payer",
    "PayerKind",
    "Recipient",
    "RecipientKind",
]
