"""
Storage and database protocols.

``Storage`` is the key/value contract the Liskov substitution examples
swap implementations behind. ``Queryable``, ``Executable`` and
``Transactional`` are the small role interfaces of the interface
segregation examples.
"""

from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """
    Key/value storage.

    Contract: after ``set(k, v)``, ``get(k)`` returns ``v``; ``delete(k)``
    returns True exactly when a value was removed.
    """

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether a value was removed."""
        ...


@runtime_checkable
class Queryable(Protocol):
    """Read access through queries."""

    def query(self, sql: str) -> List[str]:
        """Run a read query and return its rows."""
        ...


@runtime_checkable
class Executable(Protocol):
    """Write access through commands."""

    def execute(self, command: str) -> None:
        """Run a write command."""
        ...


class Transaction(Protocol):
    """An open transaction."""

    def commit(self) -> None:
        """Commit the transaction."""
        ...


@runtime_checkable
class Transactional(Protocol):
    """Something that can open transactions."""

    def begin_transaction(self) -> Transaction:
        """Open a new transaction."""
        ...


__all__ = ["Storage", "Queryable", "Executable", "Transaction", "Transactional"]
