"""
Example protocol for type safety.

This module defines the interface every runnable example satisfies, so the
registry and the CLI can run any example without knowing which one it is.
"""

from typing import Callable, Protocol, runtime_checkable

from ..models.context import RunContext
from ..models.example import ExampleInfo

# Sink for demonstration text, one call per output line
Echo = Callable[[str], None]

# Signature of an example's module-level run function
Runner = Callable[[Echo, RunContext], None]


@runtime_checkable
class ExampleProtocol(Protocol):
    """
    Protocol defining the interface for runnable examples.

    This protocol enables type checking and abstraction for examples
    without requiring inheritance.
    """

    @property
    def info(self) -> ExampleInfo:
        """Metadata describing the example."""
        ...

    def run(self, echo: Echo, context: RunContext) -> None:
        """
        Run the example to completion.

        Args:
            echo: Callable receiving each line of demonstration text
            context: Settings for this run
        """
        ...


__all__ = ["Echo", "Runner", "ExampleProtocol"]
