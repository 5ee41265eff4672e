"""In-memory adapters, used for demos and tests."""

from typing import Dict, Optional

from ...protocols.example_protocol import Echo
from ..domain import Money, Order, OrderId


class InMemoryOrderRepository:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo
        self._orders: Dict[OrderId, Order] = {}

    def save(self, order: Order) -> None:
        self._echo(f"  [InMemory] Saving order #{order.id}")
        self._orders[order.id] = order

    def find(self, order_id: OrderId) -> Optional[Order]:
        self._echo(f"  [InMemory] Finding order #{order_id}")
        return self._orders.get(order_id)


class MockPaymentGateway:
    """Accepts every charge."""

    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def charge(self, amount: Money) -> None:
        self._echo(f"  [Mock] Charging {amount}")


class ConsoleSender:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def send(self, order: Order) -> None:
        self._echo(f"  [Console] Order #{order.id} confirmed! Total: {order.total}")


__all__ = ["InMemoryOrderRepository", "MockPaymentGateway", "ConsoleSender"]
