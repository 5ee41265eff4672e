"""
Notifier protocol.

The abstraction the order service of the dependency inversion examples
owns and the concrete notification channels implement.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Notifier(Protocol):
    """Sends a text message over some channel."""

    def send(self, message: str) -> None:
        """Send ``message``."""
        ...


__all__ = ["Notifier"]
