"""Order use cases."""

import logging
from typing import Iterable, Optional

from .domain import LineItem, Order, OrderId
from .ports import OrderRepository, PaymentGateway, Sender


class OrderService:
    """
    Places and looks up orders through injected ports.

    The service depends on the port protocols only; which adapters it runs
    with is decided by whoever constructs it.
    """

    def __init__(self, repository: OrderRepository, payment: PaymentGateway, sender: Sender) -> None:
        self.repository = repository
        self.payment = payment
        self.sender = sender
        self._next_id = 1

    def place_order(self, items: Iterable[LineItem]) -> Order:
        """
        Place an order: charge, then save, then send the confirmation.

        Every call consumes the next id, including calls that fail.

        Args:
            items: Line items of the order

        Returns:
            The placed order

        Raises:
            OrderError: From the domain or from whichever port failed first;
                later steps are not attempted
        """
        order_id = OrderId(value=self._next_id)
        self._next_id += 1

        order = Order.create(order_id, items)
        logging.debug("Placing %s with %d item(s), total %s", order.id, len(order.items), order.total)

        self.payment.charge(order.total)
        self.repository.save(order)
        self.sender.send(order)

        logging.info("Placed %s", order.id)
        return order

    def get_order(self, order_id: OrderId) -> Optional[Order]:
        return self.repository.find(order_id)


__all__ = ["OrderService"]
