"""Domain entities - Order and the Payment request that composes it."""

from payment_request.domain.entities.order import Order, OrderBuilder, OrderStatus
from payment_request.domain.entities.payment import Payment, PaymentBuilder, PaymentScheme

__all__ = [
    "Order",
    "OrderBuilder",
    "OrderStatus",
    "Payment",
    "PaymentBuilder",
    "PaymentScheme",
]
