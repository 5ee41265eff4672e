"""
ISP: a client asks for exactly the roles it uses.

``backup_data`` needs to query and to run a transaction, so it depends on
``Queryable`` and ``Transactional`` combined, not on a whole database API.
"""

from typing import List, Protocol

from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.storage_protocol import Queryable, Transactional

INFO = ExampleInfo(
    name="isp_04",
    principle="ISP",
    title="Combining role interfaces: Queryable + Transactional",
    summary="A backup job depends on querying and transactions only.",
)


class BackupSource(Queryable, Transactional, Protocol):
    """Something that can be queried inside a transaction."""


class DatabaseTransaction:
    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def commit(self) -> None:
        self._echo("Transaction committed")


class DatabaseConnection:
    """Pretend connection that prints what it does."""

    def __init__(self, echo: Echo) -> None:
        self._echo = echo

    def query(self, sql: str) -> List[str]:
        self._echo(f"Running query: {sql}")
        return ["row1", "row2"]

    def begin_transaction(self) -> DatabaseTransaction:
        self._echo("Transaction started")
        return DatabaseTransaction(self._echo)


def backup_data(conn: BackupSource, echo: Echo) -> None:
    """
    Copy every row of the important table inside one transaction.

    Args:
        conn: Connection to back up
        echo: Output sink for progress lines
    """
    transaction = conn.begin_transaction()
    for row in conn.query("SELECT * FROM important_table"):
        echo(f"Backing up: {row}")
    transaction.commit()


def run(echo: Echo, context: RunContext) -> None:
    backup_data(DatabaseConnection(echo), echo)


__all__ = ["INFO", "BackupSource", "DatabaseTransaction", "DatabaseConnection", "backup_data", "run"]
