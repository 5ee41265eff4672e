"""
Shape protocols.

Capabilities shared by every shape variant in the open/closed and Liskov
substitution examples.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasArea(Protocol):
    """Anything that can report its area."""

    def area(self) -> float:
        """Return the area."""
        ...


@runtime_checkable
class Shape(HasArea, Protocol):
    """A closed shape with an area and a perimeter."""

    def perimeter(self) -> float:
        """Return the perimeter."""
        ...


__all__ = ["HasArea", "Shape"]
