"""Domain layer - Payment request value objects and their construction rules.

This layer contains:
- Entities: Order and Payment, assembled through builders
- Value Objects: Payer, Recipient and Currency, created through named factories
- Coded enumerations: OrderStatus and PaymentScheme with stable wire codes
- Domain Exceptions: invalid arguments and unknown wire codes

The domain layer performs no I/O and has no dependencies on transport or
serialization code.
"""
