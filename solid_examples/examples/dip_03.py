"""
DIP: adding a channel touches no domain code.

``Owl`` is a new sender; ``OrderService`` is reused as is.
"""

from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from .dip_02 import OrderService

INFO = ExampleInfo(
    name="dip_03",
    principle="DIP",
    title="Extending with a new sender",
    summary="Email, SMS and owl post behind the same abstraction.",
)


class ChannelSender:
    """Sender that announces the channel it uses."""

    channel = ""

    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def send(self, message: str) -> None:
        self._echo(f"Sending by {self.channel}: {message}")


class Email(ChannelSender):
    channel = "email"


class Sms(ChannelSender):
    channel = "sms"


class Owl(ChannelSender):
    channel = "\U0001f989"


def run(echo: Echo, context: RunContext) -> None:
    orders = [
        (OrderService(Email(echo), echo), 101),
        (OrderService(Sms(echo), echo), 42),
        (OrderService(Owl(echo), echo), 13),
    ]
    for index, (service, order_id) in enumerate(orders):
        if index:
            echo("")
        service.place_order(order_id)


__all__ = ["INFO", "ChannelSender", "Email", "Sms", "Owl", "run"]
