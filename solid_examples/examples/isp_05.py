"""
ISP: replication needs read and write roles, nothing else.

Any store that is both ``Queryable`` and ``Executable`` can be a source or
a destination.
"""

from typing import List, Optional, Protocol

from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.storage_protocol import Executable, Queryable

INFO = ExampleInfo(
    name="isp_05",
    principle="ISP",
    title="Combining role interfaces: Queryable + Executable",
    summary="Replication between two stores that can be read and written.",
)


class ReplicaStore(Queryable, Executable, Protocol):
    """A store rows can be read from and written to."""


class MemoryStorage:
    """In-memory rows; every executed command is appended as a row."""

    def __init__(self, echo: Echo, data: Optional[List[str]] = None) -> None:
        self._echo = echo
        self.data: List[str] = list(data or [])

    def query(self, sql: str) -> List[str]:
        return list(self.data)

    def execute(self, command: str) -> None:
        self._echo(f"Executing: {command}")
        self.data.append(command)


def replicate(source: ReplicaStore, dest: ReplicaStore) -> None:
    for row in source.query("SELECT * FROM table"):
        dest.execute(f"INSERT INTO table VALUES ({row})")


def run(echo: Echo, context: RunContext) -> None:
    source = MemoryStorage(echo, ["Alice", "Bob"])
    dest = MemoryStorage(echo)

    replicate(source, dest)
    echo(f"Destination data: {dest.data!r}")


__all__ = ["INFO", "ReplicaStore", "MemoryStorage", "replicate", "run"]
