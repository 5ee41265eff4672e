"""
Simulated production adapters.

Each adapter prints the call it would make to the real service instead of
making it. The Postgres repository keeps rows in a dictionary so lookups
after a save still work.
"""

from typing import Dict, Optional

from ...protocols.example_protocol import Echo
from ..domain import Money, Order, OrderId


class PostgresOrderRepository:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo
        self._simulated_db: Dict[OrderId, Order] = {}

    def save(self, order: Order) -> None:
        self._echo(f"  [Postgres] INSERT INTO orders VALUES ({order.id}, ...)")
        self._simulated_db[order.id] = order

    def find(self, order_id: OrderId) -> Optional[Order]:
        self._echo(f"  [Postgres] SELECT * FROM orders WHERE id = {order_id}")
        return self._simulated_db.get(order_id)


class StripePaymentGateway:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def charge(self, amount: Money) -> None:
        self._echo(f"  [Stripe API] POST /charges amount={amount}")


class SendGridSender:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def send(self, order: Order) -> None:
        self._echo(f"  [SendGrid API] Sending email: 'Order #{order.id} Confirmed'")


__all__ = ["PostgresOrderRepository", "StripePaymentGateway", "SendGridSender"]
