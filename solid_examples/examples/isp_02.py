"""
ISP, the fix: small role interfaces.

The viewer implements ``Readable`` and ``Searchable`` and nothing else.
"""

from typing import List

from ..models.context import RunContext
from ..models.documents import Metadata
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from .isp_01 import find_offsets

INFO = ExampleInfo(
    name="isp_02",
    principle="ISP",
    title="Role interfaces: Readable and Searchable",
    summary="The viewer implements only what it can honour.",
)


class ReadOnlyViewer:
    """A viewer that reads and searches."""

    def __init__(self, content: str, title: str) -> None:
        self._content = content
        self._metadata = Metadata(title=title)

    def get_content(self) -> str:
        return self._content

    def get_metadata(self) -> Metadata:
        return self._metadata

    def search(self, query: str) -> List[int]:
        return find_offsets(self._content, query)


def run(echo: Echo, context: RunContext) -> None:
    viewer = ReadOnlyViewer("Hello SOLID world!", "ISP Example")

    echo(f"Title: {viewer.get_metadata().title}")
    echo(f"Content: {viewer.get_content()}")
    echo(f"Search 'SOLID': {viewer.search('SOLID')}")


__all__ = ["INFO", "ReadOnlyViewer", "run"]
