"""
Order domain: values, the order aggregate and its errors.

Nothing here knows about storage, payment providers or notification
channels.
"""

from typing import Iterable, Tuple

from pydantic import Field

from ..models.base import ValueModel
from ..utils.error_handling import SolidExamplesError
from ..utils.formatting import format_cents


class OrderError(SolidExamplesError):
    """Base class for failures of the order use cases."""


class InvalidOrderError(OrderError):
    """The order breaks a domain rule."""


class PaymentFailedError(OrderError):
    """The payment gateway refused or failed the charge."""


class StorageFailedError(OrderError):
    """The repository could not store or load an order."""


class NotificationFailedError(OrderError):
    """The confirmation could not be sent."""


class OrderId(ValueModel):
    value: int = Field(ge=1)

    def __str__(self) -> str:
        return f"OrderId({self.value})"


class Money(ValueModel):
    """An amount in cents."""

    cents: int = Field(ge=0)

    def __add__(self, other: "Money") -> "Money":
        return Money(cents=self.cents + other.cents)

    def __str__(self) -> str:
        return format_cents(self.cents)


class LineItem(ValueModel):
    name: str
    price: Money


class Order(ValueModel):
    """
    A placed order.

    Use ``Order.create`` so the total is derived from the items and the
    "at least one item" rule is enforced.
    """

    id: OrderId
    items: Tuple[LineItem, ...]
    total: Money

    @classmethod
    def create(cls, order_id: OrderId, items: Iterable[LineItem]) -> "Order":
        """
        Build an order from its line items.

        Args:
            order_id: Identifier assigned by the application
            items: Line items, at least one

        Returns:
            The order with its total computed

        Raises:
            InvalidOrderError: If there are no items
        """
        items = tuple(items)
        if not items:
            raise InvalidOrderError(f"Order {order_id} has no items")
        total = sum((item.price for item in items), Money(cents=0))
        return cls(id=order_id, items=items, total=total)


__all__ = [
    "OrderError",
    "InvalidOrderError",
    "PaymentFailedError",
    "StorageFailedError",
    "NotificationFailedError",
    "OrderId",
    "Money",
    "LineItem",
    "Order",
]
