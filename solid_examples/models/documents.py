"""Document models used by the interface segregation examples."""

from enum import Enum

from .base import ValueModel


class Metadata(ValueModel):
    """Document metadata."""

    title: str


class Version(ValueModel):
    """A saved document version."""

    id: int


class User(ValueModel):
    """A user documents can be shared with."""

    name: str


class Comment(ValueModel):
    """A comment left on a document."""

    text: str


class Permission(str, Enum):
    """Access a document can be shared with."""

    READ = "read"
    WRITE = "write"


__all__ = ["Metadata", "Version", "User", "Comment", "Permission"]
