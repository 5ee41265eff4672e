"""
ISP, the problem: one fat ``Document`` interface.

A read-only viewer only needs to read and search, but the interface also
demands writing, exporting, versioning, permissions and collaboration.
Every method it cannot honour becomes a stub that raises.
"""

import re
from abc import ABC, abstractmethod
from typing import List

from ..models.context import RunContext
from ..models.documents import Comment, Metadata, Permission, User, Version
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..utils.error_handling import SolidExamplesError

INFO = ExampleInfo(
    name="isp_01",
    principle="ISP",
    title="Fat Document interface forces stub methods",
    summary="A read-only viewer must implement every editing operation.",
)


class UnsupportedOperationError(SolidExamplesError, NotImplementedError):
    """Raised by a stub for an operation the implementation cannot perform."""


def find_offsets(content: str, query: str) -> List[int]:
    """
    Start offsets of every non-overlapping occurrence of ``query``.

    Examples:
        >>> find_offsets("Hello SOLID world!", "SOLID")
        [6]
    """
    if not query:
        return []
    return [match.start() for match in re.finditer(re.escape(query), content)]


class Document(ABC):
    """Everything any client could ever want from a document."""

    # Reading
    @abstractmethod
    def get_content(self) -> str: ...

    @abstractmethod
    def get_metadata(self) -> Metadata: ...

    @abstractmethod
    def search(self, query: str) -> List[int]: ...

    # Writing
    @abstractmethod
    def set_content(self, content: str) -> None: ...

    @abstractmethod
    def append(self, text: str) -> None: ...

    @abstractmethod
    def insert(self, pos: int, text: str) -> None: ...

    # Formatting
    @abstractmethod
    def to_html(self) -> str: ...

    @abstractmethod
    def to_markdown(self) -> str: ...

    @abstractmethod
    def to_pdf(self) -> bytes: ...

    # Versioning
    @abstractmethod
    def save_version(self) -> Version: ...

    @abstractmethod
    def list_versions(self) -> List[Version]: ...

    @abstractmethod
    def restore_version(self, version: Version) -> None: ...

    # Permissions
    @abstractmethod
    def can_read(self, user: User) -> bool: ...

    @abstractmethod
    def can_write(self, user: User) -> bool: ...

    @abstractmethod
    def share_with(self, user: User, permission: Permission) -> None: ...

    # Collaboration
    @abstractmethod
    def add_comment(self, comment: Comment) -> None: ...

    @abstractmethod
    def list_comments(self) -> List[Comment]: ...

    @abstractmethod
    def notify_watchers(self) -> None: ...


class ReadOnlyViewer(Document):
    """Viewer that implements the whole interface, mostly with stubs."""

    def __init__(self, content: str, title: str) -> None:
        self._content = content
        self._metadata = Metadata(title=title)
        self._comments: List[Comment] = []

    def get_content(self) -> str:
        return self._content

    def get_metadata(self) -> Metadata:
        return self._metadata

    def search(self, query: str) -> List[int]:
        return find_offsets(self._content, query)

    def set_content(self, content: str) -> None:
        raise UnsupportedOperationError("Read-only viewer cannot modify content")

    def append(self, text: str) -> None:
        raise UnsupportedOperationError("Read-only viewer cannot append text")

    def insert(self, pos: int, text: str) -> None:
        raise UnsupportedOperationError("Read-only viewer cannot insert text")

    def to_html(self) -> str:
        raise UnsupportedOperationError("Read-only viewer cannot export to HTML")

    def to_markdown(self) -> str:
        raise UnsupportedOperationError("Read-only viewer cannot export to Markdown")

    def to_pdf(self) -> bytes:
        raise UnsupportedOperationError("Read-only viewer cannot export to PDF")

    def save_version(self) -> Version:
        raise UnsupportedOperationError("Read-only viewer does not support versioning")

    def list_versions(self) -> List[Version]:
        return []

    def restore_version(self, version: Version) -> None:
        raise UnsupportedOperationError("Read-only viewer cannot restore versions")

    def can_read(self, user: User) -> bool:
        return True

    def can_write(self, user: User) -> bool:
        return False

    def share_with(self, user: User, permission: Permission) -> None:
        raise UnsupportedOperationError("Read-only viewer cannot share documents")

    def add_comment(self, comment: Comment) -> None:
        self._comments.append(comment)

    def list_comments(self) -> List[Comment]:
        return list(self._comments)

    def notify_watchers(self) -> None:
        # Nobody watches a read-only viewer
        pass


def run(echo: Echo, context: RunContext) -> None:
    viewer = ReadOnlyViewer("Hello SOLID world!", "ISP Example")

    echo(f"Title: {viewer.get_metadata().title}")
    echo(f"Content: {viewer.get_content()}")
    echo(f"Search 'SOLID': {viewer.search('SOLID')}")


__all__ = ["INFO", "UnsupportedOperationError", "find_offsets", "Document", "ReadOnlyViewer", "run"]
