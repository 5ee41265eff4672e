"""
LSP, the fix: storages that keep the contract.

The file backend validates keys and reports I/O problems, so it behaves
exactly like the in-memory backend from the caller's point of view.
"""

from ..dispatch import CapabilityDriver
from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..storage import FileStorage, MemoryStorage
from .lsp_03 import demo

INFO = ExampleInfo(
    name="lsp_04",
    principle="LSP",
    title="Contract-keeping storages are interchangeable",
    summary="Memory and validating file storage print identical results.",
)


def run(echo: Echo, context: RunContext) -> None:
    driver = CapabilityDriver(demo, [MemoryStorage(), FileStorage(context.storage_path)])
    for lines in driver.run():
        for line in lines:
            echo(line)


__all__ = ["INFO", "run"]
