"""
LSP, the problem: storages that only look substitutable.

All three backends satisfy ``Storage`` by signature, yet the same
``demo`` prints different results: the Redis backend loses every value
and the naive file backend hides its failures.
"""

from typing import List

from ..dispatch import CapabilityDriver
from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.storage_protocol import Storage
from ..storage import MemoryStorage, NaiveFileStorage, RedisStorage

INFO = ExampleInfo(
    name="lsp_03",
    principle="LSP",
    title="Storages that break the contract behind the interface",
    summary="Redis loses values and the naive file store swallows errors.",
)


def demo(storage: Storage) -> List[str]:
    """Store, read back and delete one key."""
    storage.set("key", "value")
    return [
        f"Value = {storage.get('key')!r}",
        f"Deleted = {storage.delete('key')}",
    ]


def run(echo: Echo, context: RunContext) -> None:
    driver = CapabilityDriver(
        demo,
        [MemoryStorage(), RedisStorage(), NaiveFileStorage(context.storage_path)],
    )
    for lines in driver.run():
        for line in lines:
            echo(line)


__all__ = ["INFO", "demo", "run"]
