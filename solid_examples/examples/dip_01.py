"""
DIP, the problem: the order service builds its own email notifier.

Switching channel means editing ``OrderService``.
"""

from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo

INFO = ExampleInfo(
    name="dip_01",
    principle="DIP",
    title="Tight coupling to a concrete notifier",
    summary="OrderService instantiates EmailNotifier itself.",
)


class EmailNotifier:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def send(self, message: str) -> None:
        self._echo(f"Sending email: {message}")


class OrderService:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo
        # Hardcoded dependency on a concrete class
        self.notifier = EmailNotifier(echo)

    def place_order(self, order_id: int) -> None:
        self._echo(f"Order #{order_id} placed")
        self.notifier.send(f"Order #{order_id} confirmed")


def run(echo: Echo, context: RunContext) -> None:
    echo("=== Problem: Tight Coupling ===")
    echo("")
    OrderService(echo).place_order(101)


__all__ = ["INFO", "EmailNotifier", "OrderService", "run"]
