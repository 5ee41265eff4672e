"""
Example registry.

Maps example names to runnable examples. The CLI only ever talks to the
registry, so adding an example is one ``register`` call.
"""

import logging
from typing import Dict, List, Optional

import click

from ..models.context import RunContext
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo, Runner
from ..utils.error_handling import SolidExamplesError


class UnknownExampleError(SolidExamplesError, KeyError):
    """Raised when looking up an example name that was never registered."""

    def __init__(self, name: str, available: List[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown example '{name}'. Available: {', '.join(available)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicateExampleError(SolidExamplesError, ValueError):
    """Raised when registering a name that is already taken."""


class RegisteredExample:
    """An example's metadata bound to its run function."""

    def __init__(self, info: ExampleInfo, runner: Runner) -> None:
        self._info = info
        self._runner = runner

    @property
    def info(self) -> ExampleInfo:
        """Metadata describing the example."""
        return self._info

    def run(self, echo: Optional[Echo] = None, context: Optional[RunContext] = None) -> None:
        """Run the example, printing through ``echo`` (``click.echo`` by default)."""
        self._runner(echo or click.echo, context or RunContext())

    def capture(self, context: Optional[RunContext] = None) -> str:
        """Run the example and return its output as one string."""
        lines: List[str] = []
        self.run(lines.append, context)
        return "\n".join(lines) + "\n" if lines else ""

    def __repr__(self) -> str:
        return f"RegisteredExample({self._info.name!r})"


class ExampleRegistry:
    """
    Ordered collection of runnable examples.

    Examples are listed and run in registration order.
    """

    def __init__(self) -> None:
        self._examples: Dict[str, RegisteredExample] = {}

    def register(self, info: ExampleInfo, runner: Runner) -> RegisteredExample:
        """
        Register an example.

        Args:
            info: Example metadata; ``info.name`` becomes the lookup key
            runner: Function running the example; prints through its first argument

        Returns:
            The registered example

        Raises:
            DuplicateExampleError: If the name is already registered
        """
        if info.name in self._examples:
            raise DuplicateExampleError(f"Example '{info.name}' is already registered")

        example = RegisteredExample(info, runner)
        self._examples[info.name] = example
        logging.debug("Registered example %s (%s)", info.name, info.principle)
        return example

    def get(self, name: str) -> RegisteredExample:
        """
        Look up an example by name.

        Raises:
            UnknownExampleError: If no example has that name
        """
        try:
            return self._examples[name]
        except KeyError:
            raise UnknownExampleError(name, self.names()) from None

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._examples)

    def by_principle(self, principle: str) -> List[RegisteredExample]:
        """Examples demonstrating ``principle`` (case-insensitive)."""
        wanted = principle.upper()
        return [example for example in self._examples.values() if example.info.principle == wanted]

    def __iter__(self):
        return iter(self._examples.values())

    def __len__(self) -> int:
        return len(self._examples)

    def __contains__(self, name: object) -> bool:
        return name in self._examples


__all__ = [
    "UnknownExampleError",
    "DuplicateExampleError",
    "RegisteredExample",
    "ExampleRegistry",
]
