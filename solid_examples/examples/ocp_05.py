"""
OCP with a registered pipeline.

Steps are registered at runtime and run in registration order. Adding a
step is one ``register_processing`` call.
"""

import logging
from typing import List

from ..editor import LowerCase, SpellChecker
from ..models.context import RunContext
from ..models.editor import EditorContent
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.report_protocol import Processing

INFO = ExampleInfo(
    name="ocp_05",
    principle="OCP",
    title="Text processor with a registry of steps",
    summary="Any number of steps, registered at runtime and run in order.",
)


class TxtProcessor:
    """Runs registered processings in registration order."""

    def __init__(self, echo: Echo) -> None:
        self._echo = echo
        self._processings: List[Processing] = []

    def register_processing(self, processing: Processing) -> None:
        self._processings.append(processing)
        logging.debug("Registered processing %s", processing.name)

    def run(self, content: EditorContent) -> None:
        for processing in self._processings:
            self._echo(f"Running processing: {processing.name}")
            processing.apply(content)


def run(echo: Echo, context: RunContext) -> None:
    processor = TxtProcessor(echo)
    processor.register_processing(LowerCase())
    processor.register_processing(SpellChecker())

    content = EditorContent(content="HELLO WORLD")
    processor.run(content)

    echo("--- FINAL CONTENT ---")
    echo(content.content)


__all__ = ["INFO", "TxtProcessor", "run"]
