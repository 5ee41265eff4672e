"""
DIP at architecture scale: ports and adapters.

The same ``OrderService`` runs first with in-memory adapters, then with
simulated production services. Only the wiring below changes.
"""

from typing import List

from ..hexagonal import LineItem, Money, OrderError, OrderRepository, OrderService, PaymentGateway, Sender
from ..hexagonal.adapters import (
    ConsoleSender,
    InMemoryOrderRepository,
    MockPaymentGateway,
    PostgresOrderRepository,
    SendGridSender,
    StripePaymentGateway,
)
from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo

INFO = ExampleInfo(
    name="dip_04",
    principle="DIP",
    title="Hexagonal architecture: one service, two sets of adapters",
    summary="In-memory test doubles and simulated external services.",
)

CART: List[LineItem] = [
    LineItem(name="Rust Programming Book", price=Money(cents=4999)),
    LineItem(name="Mechanical Keyboard", price=Money(cents=12999)),
]


def build_service(repository: OrderRepository, payment: PaymentGateway, sender: Sender) -> OrderService:
    return OrderService(repository, payment, sender)


def run(echo: Echo, context: RunContext) -> None:
    echo("=== Hexagonal Architecture Demo ===")
    echo("")

    echo("--- Configuration #1: In-Memory Adapters (Testing) ---")
    echo("")
    service = build_service(InMemoryOrderRepository(echo), MockPaymentGateway(echo), ConsoleSender(echo))
    try:
        order = service.place_order(CART)
    except OrderError as e:
        echo("")
        echo(f"  Error: {e}")
    else:
        echo("")
        echo(f"  Success! Order {order.id} placed.")
    echo("")

    echo("--- Configuration #2: External Services (Production) ---")
    echo("")
    service = build_service(PostgresOrderRepository(echo), StripePaymentGateway(echo), SendGridSender(echo))
    try:
        order = service.place_order(CART)
    except OrderError as e:
        echo("")
        echo(f"  Error: {e}")
        echo("")
        return
    echo("")
    echo(f"  Success! Order {order.id} placed.")
    echo("")
    retrieved = service.get_order(order.id)
    if retrieved is not None:
        echo(f"  Retrieved: {len(retrieved.items)} items, total {retrieved.total}")
        echo("")


__all__ = ["INFO", "CART", "build_service", "run"]
