"""
Ports and adapters order service.

``domain`` holds the order rules, ``ports`` the capabilities the domain
needs, ``application`` the use cases written against those ports, and
``adapters`` the interchangeable implementations.
"""

from .application import OrderService
from .domain import (
    InvalidOrderError,
    LineItem,
    Money,
    NotificationFailedError,
    Order,
    OrderError,
    OrderId,
    PaymentFailedError,
    StorageFailedError,
)
from .ports import OrderRepository, PaymentGateway, Sender

__all__ = [
    "OrderService",
    "OrderId",
    "Money",
    "LineItem",
    "Order",
    "OrderError",
    "InvalidOrderError",
    "PaymentFailedError",
    "StorageFailedError",
    "NotificationFailedError",
    "OrderRepository",
    "PaymentGateway",
    "Sender",
]
