"""Port implementations: in-memory doubles and simulated external services."""

from .external import PostgresOrderRepository, SendGridSender, StripePaymentGateway
from .in_memory import ConsoleSender, InMemoryOrderRepository, MockPaymentGateway

__all__ = [
    "InMemoryOrderRepository",
    "MockPaymentGateway",
    "ConsoleSender",
    "PostgresOrderRepository",
    "StripePaymentGateway",
    "SendGridSender",
]
