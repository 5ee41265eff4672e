"""
OCP with a fixed pipeline.

``TxtProcessor.run`` accepts any two processings. New steps need no change
to the processor, but the number of steps is still baked into ``run``.
"""

from ..editor import LowerCase, SpellChecker
from ..models.context import RunContext
from ..models.editor import EditorContent
from ..models.example import ExampleInfo
from ..protocols.example_protocol import Echo
from ..protocols.report_protocol import Processing

INFO = ExampleInfo(
    name="ocp_04",
    principle="OCP",
    title="Text processor with two pluggable steps",
    summary="Steps are swappable, but run() always takes exactly two.",
)


class TxtProcessor:
    def run(self, first: Processing, second: Processing, content: EditorContent) -> None:
        first.apply(content)
        second.apply(content)


def run(echo: Echo, context: RunContext) -> None:
    content = EditorContent(content="HELLO WORLD")
    TxtProcessor().run(LowerCase(), SpellChecker(), content)

    echo("--- FINAL CONTENT ---")
    echo(content.content)


__all__ = ["INFO", "TxtProcessor", "run"]
