"""
Document role protocols.

Each protocol covers one thing a client may want from a document, so a
read-only client depends on ``Readable`` alone.
"""

from typing import List, Protocol, runtime_checkable

from ..models.documents import Metadata


@runtime_checkable
class Readable(Protocol):
    """A document whose content and metadata can be read."""

    def get_content(self) -> str:
        """Return the document text."""
        ...

    def get_metadata(self) -> Metadata:
        """Return the document metadata."""
        ...


@runtime_checkable
class Searchable(Protocol):
    """A document that can be searched."""

    def search(self, query: str) -> List[int]:
        """Return the start offsets of every non-overlapping match."""
        ...


__all__ = ["Readable", "Searchable"]
