"""
DIP, the fix: the order service owns a ``Notifier`` abstraction.

Concrete notifiers depend on that abstraction and are injected.
"""

from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.notifier_protocol import Notifier

INFO = ExampleInfo(
    name="dip_02",
    principle="DIP",
    title="Injecting a Notifier abstraction",
    summary="OrderService works with email and SMS notifiers unchanged.",
)


class OrderService:
    def __init__(self, notifier: Notifier, echo: Echo) -> None:
        self.notifier = notifier
        self._echo = echo

    def place_order(self, order_id: int) -> None:
        self._echo(f"Order #{order_id} placed")
        self.notifier.send(f"Order #{order_id} confirmed")


class EmailNotifier:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def send(self, message: str) -> None:
        self._echo(f"Sending email: {message}")


class SmsNotifier:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def send(self, message: str) -> None:
        self._echo(f"Sending SMS: {message}")


def run(echo: Echo, context: RunContext) -> None:
    echo("=== Dependency Inversion Principle ===")
    echo("")
    OrderService(EmailNotifier(echo), echo).place_order(201)
    echo("")
    OrderService(SmsNotifier(echo), echo).place_order(202)


__all__ = ["INFO", "OrderService", "EmailNotifier", "SmsNotifier", "run"]
