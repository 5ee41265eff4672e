"""
Ports: the capabilities the order use cases need.

Implementations report failures by raising the matching ``OrderError``
subclass.
"""

from typing import Optional, Protocol, runtime_checkable

from .domain import Money, Order, OrderId


@runtime_checkable
class OrderRepository(Protocol):
    """Persists orders."""

    def save(self, order: Order) -> None:
        """
        Store an order, replacing any order with the same id.

        Raises:
            StorageFailedError: If the order could not be stored
        """
        ...

    def find(self, order_id: OrderId) -> Optional[Order]:
        """Return the stored order, or None if there is none."""
        ...


@runtime_checkable
class PaymentGateway(Protocol):
    """Charges customers."""

    def charge(self, amount: Money) -> None:
        """
        Charge ``amount``.

        Raises:
            PaymentFailedError: If the charge did not go through
        """
        ...


@runtime_checkable
class Sender(Protocol):
    """Sends order confirmations."""

    def send(self, order: Order) -> None:
        """
        Confirm ``order`` to the customer.

        Raises:
            NotificationFailedError: If the confirmation was not sent
        """
        ...


__all__ = ["OrderRepository", "PaymentGateway", "Sender"]
